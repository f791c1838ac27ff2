"""Data Validator node — routes data to valid/invalid outputs by rule."""

from typing import Any, Mapping

from flowcanvas.nodes.base import (
    BaseNode, Handle, NodeKind, NodeKindDescriptor, Section, form_field,
    input_handle, output_handle,
)

_VALIDATION_TYPES = {
    "schema": ("JSON Schema", "Validate against JSON schema"),
    "field": ("Field Validation", "Validate specific field"),
    "custom": ("Custom Logic", "Custom validation logic"),
    "type": ("Type Checking", "Type checking validation"),
    "format": ("Format Validation", "Format validation (email, URL, etc.)"),
}

_RULES = [
    ("required", "Required"),
    ("email", "Email Format"),
    ("url", "URL Format"),
    ("phone", "Phone Number"),
    ("date", "Date Format"),
    ("number", "Number"),
    ("integer", "Integer"),
    ("boolean", "Boolean"),
    ("array", "Array"),
    ("object", "Object"),
    ("pattern", "Regex Pattern"),
    ("length", "Length Range"),
    ("range", "Value Range"),
    ("enum", "Allowed Values"),
]


class DataValidatorNode(BaseNode):
    descriptor = NodeKindDescriptor(
        kind=NodeKind.DATA_VALIDATOR.value,
        label="Data Validator",
        icon="check-circle",
        accent_color="#22c55e",
        category="compute",
    )
    schema = {
        "validationType": "schema",
        "schema": "",
        "field": "",
        "rule": "required",
        "pattern": "",
        "minLength": "",
        "maxLength": "",
        "minValue": "",
        "maxValue": "",
        "allowedValues": "",
        "customValidation": "",
        "errorMessage": "Validation failed",
        "strictMode": False,
        "validationMode": "all",
        "errorFormat": "simple",
    }
    width = 320

    def description(self, state: Mapping[str, Any]) -> str | None:
        return _VALIDATION_TYPES.get(state.get("validationType"), ("", None))[1]

    def input_handles(self, state: Mapping[str, Any]) -> list[Handle]:
        return [input_handle("data")]

    def output_handles(self, state: Mapping[str, Any]) -> list[Handle]:
        return [output_handle("valid", 0.25), output_handle("invalid", 0.75)]

    def _rule_fields(self, state: Mapping[str, Any]) -> list:
        rule = state.get("rule")
        if rule == "pattern":
            return [form_field(state, "pattern", "Regex Pattern")]
        if rule == "length":
            return [form_field(state, "minLength", "Min Length", "number"),
                    form_field(state, "maxLength", "Max Length", "number")]
        if rule == "range":
            return [form_field(state, "minValue", "Min Value", "number"),
                    form_field(state, "maxValue", "Max Value", "number")]
        if rule == "enum":
            return [form_field(state, "allowedValues", "Allowed Values",
                               help_text="Comma-separated list")]
        return []

    def sections(self, state: Mapping[str, Any]) -> list[Section]:
        validation_type = state.get("validationType")
        sections = [Section(title="Validation Type", fields=[
            form_field(state, "validationType", "Type", "select",
                       [(k, label) for k, (label, _) in _VALIDATION_TYPES.items()]),
        ])]
        if validation_type == "schema":
            sections.append(Section(title="JSON Schema", fields=[
                form_field(state, "schema", "Schema Definition", "textarea"),
            ]))
        elif validation_type == "field":
            sections.append(Section(title="Field Validation", fields=[
                form_field(state, "field", "Field Name"),
                form_field(state, "rule", "Validation Rule", "select", _RULES),
                *self._rule_fields(state),
            ]))
        elif validation_type == "custom":
            sections.append(Section(title="Custom Validation", fields=[
                form_field(state, "customValidation", "Validation Function", "textarea"),
            ]))
        sections.append(Section(title="Error Handling", fields=[
            form_field(state, "errorMessage", "Error Message"),
            form_field(state, "strictMode", "Strict mode", "checkbox"),
        ]))
        sections.append(Section(title="Advanced Options", collapsible=True, fields=[
            form_field(state, "validationMode", "Validation Mode", "select", [
                ("all", "Validate All Fields"),
                ("first", "Stop on First Error"),
                ("collect", "Collect All Errors"),
            ]),
            form_field(state, "errorFormat", "Error Format", "select", [
                ("simple", "Simple Message"),
                ("detailed", "Detailed Errors"),
                ("json", "JSON Format"),
            ]),
        ]))
        return sections
