"""File Processor node — read, write and convert files."""

from typing import Any, Mapping

from flowcanvas.nodes.base import (
    BaseNode, Handle, NodeKind, NodeKindDescriptor, Section, form_field,
    input_handle, output_handle,
)

_OPERATIONS = {
    "read": ("Read File", "Read and parse file content"),
    "write": ("Write File", "Write data to a file"),
    "append": ("Append to File", "Append data to existing file"),
    "copy": ("Copy File", "Copy file to new location"),
    "move": ("Move File", "Move file to new location"),
    "delete": ("Delete File", "Delete file from system"),
    "compress": ("Compress File", "Compress file using specified algorithm"),
    "extract": ("Extract File", "Extract compressed file"),
    "convert": ("Convert Format", "Convert file between formats"),
}

_FILE_TYPES = [
    ("text", "Text"), ("json", "JSON"), ("csv", "CSV"), ("xml", "XML"),
    ("yaml", "YAML"), ("binary", "Binary"), ("image", "Image"), ("pdf", "PDF"),
]

_ENCODINGS = [("utf8", "UTF-8"), ("ascii", "ASCII"), ("latin1", "Latin-1"), ("base64", "Base64")]

_OUTPUT_FORMATS = [
    ("json", "JSON"), ("csv", "CSV"), ("xml", "XML"), ("yaml", "YAML"),
    ("text", "Plain Text"), ("array", "Array"), ("object", "Object"),
]

_COMPRESSIONS = [("none", "None"), ("gzip", "Gzip"), ("zip", "ZIP"), ("tar", "TAR"), ("7z", "7-Zip")]


class FileProcessorNode(BaseNode):
    descriptor = NodeKindDescriptor(
        kind=NodeKind.FILE_PROCESSOR.value,
        label="File Processor",
        icon="file-text",
        accent_color="#64748b",
        category="generic",
    )
    schema = {
        "operation": "read",
        "filePath": "",
        "fileType": "text",
        "encoding": "utf8",
        "outputFormat": "json",
        "delimiter": ",",
        "hasHeader": True,
        "compression": "none",
        "outputPath": "",
        "appendMode": False,
        "errorHandling": "fail",
        "timeout": "30000",
    }
    width = 320

    def description(self, state: Mapping[str, Any]) -> str | None:
        return _OPERATIONS.get(state.get("operation"), ("", None))[1]

    def input_handles(self, state: Mapping[str, Any]) -> list[Handle]:
        return [input_handle("data", 0.25), input_handle("trigger", 0.75)]

    def output_handles(self, state: Mapping[str, Any]) -> list[Handle]:
        return [output_handle("content", 0.25), output_handle("status", 0.75)]

    def sections(self, state: Mapping[str, Any]) -> list[Section]:
        operation = state.get("operation")
        sections = [
            Section(title="Operation", fields=[
                form_field(state, "operation", "Operation", "select",
                           [(k, label) for k, (label, _) in _OPERATIONS.items()]),
            ]),
            Section(title="File Configuration", fields=[
                form_field(state, "filePath", "File Path"),
                form_field(state, "fileType", "File Type", "select", _FILE_TYPES),
                form_field(state, "encoding", "Encoding", "select", _ENCODINGS),
            ]),
        ]
        if operation in ("read", "convert"):
            parsing = [form_field(state, "outputFormat", "Output Format", "select", _OUTPUT_FORMATS)]
            if state.get("fileType") == "csv":
                parsing += [
                    form_field(state, "delimiter", "Delimiter"),
                    form_field(state, "hasHeader", "Has header row", "checkbox"),
                ]
            sections.append(Section(title="Parsing Options", fields=parsing))
        if operation in ("write", "append"):
            sections.append(Section(title="Output Configuration", fields=[
                form_field(state, "outputPath", "Output Path"),
                form_field(state, "appendMode", "Append mode", "checkbox"),
            ]))
        if operation in ("compress", "extract"):
            sections.append(Section(title="Compression Options", fields=[
                form_field(state, "compression", "Compression Type", "select", _COMPRESSIONS),
            ]))
        sections.append(Section(title="Advanced Options", collapsible=True, fields=[
            form_field(state, "errorHandling", "Error Handling", "select", [
                ("fail", "Fail on Error"),
                ("skip", "Skip and Continue"),
                ("retry", "Retry Operation"),
            ]),
            form_field(state, "timeout", "Timeout (ms)", "number"),
        ]))
        return sections
