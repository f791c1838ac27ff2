"""API Connector node — configures an HTTP request to an external API."""

from typing import Any, Mapping

from flowcanvas.nodes.base import (
    BaseNode, Handle, NodeKind, NodeKindDescriptor, Section, form_field,
    input_handle, output_handle,
)

_METHOD_DESCRIPTIONS = {
    "GET": "Retrieve data from the API",
    "POST": "Create new resource or submit data",
    "PUT": "Update existing resource completely",
    "PATCH": "Partially update existing resource",
    "DELETE": "Remove resource from the API",
}

_METHODS = [(m, m) for m in ("GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS")]
_METHODS_WITH_BODY = ("POST", "PUT", "PATCH")

_AUTH_TYPES = [
    ("none", "No Authentication"),
    ("api_key", "API Key"),
    ("bearer", "Bearer Token"),
    ("basic", "Basic Auth"),
    ("oauth2", "OAuth 2.0"),
]

_OUTPUT_FORMATS = [
    ("json", "JSON"),
    ("text", "Plain Text"),
    ("xml", "XML"),
    ("binary", "Binary"),
    ("raw", "Raw Response"),
]

_RATE_LIMITS = [
    ("none", "No Rate Limiting"),
    ("per_second", "Per Second"),
    ("per_minute", "Per Minute"),
    ("per_hour", "Per Hour"),
]


class ApiConnectorNode(BaseNode):
    descriptor = NodeKindDescriptor(
        kind=NodeKind.API_CONNECTOR.value,
        label="API Connector",
        icon="globe",
        accent_color="#a855f7",
        category="generic",
    )
    schema = {
        "url": "",
        "method": "GET",
        "headers": "{}",
        "body": "",
        "authType": "none",
        "apiKey": "",
        "username": "",
        "password": "",
        "timeout": "30000",
        "retryCount": "3",
        "outputFormat": "json",
        "successCodes": "200,201,202",
        "rateLimit": "none",
        "cacheDuration": "0",
    }
    width = 350

    def description(self, state: Mapping[str, Any]) -> str | None:
        return _METHOD_DESCRIPTIONS.get(state.get("method"))

    def input_handles(self, state: Mapping[str, Any]) -> list[Handle]:
        return [input_handle("trigger")]

    def output_handles(self, state: Mapping[str, Any]) -> list[Handle]:
        return [output_handle("response", 0.25), output_handle("status", 0.75)]

    def sections(self, state: Mapping[str, Any]) -> list[Section]:
        request = [
            form_field(state, "url", "API URL",
                       placeholder="https://api.example.com/endpoint",
                       help_text="Full URL of the API endpoint", required=True),
            form_field(state, "method", "HTTP Method", "select", _METHODS,
                       help_text="HTTP method for the request"),
            form_field(state, "headers", "Headers (JSON)", "textarea",
                       help_text="Request headers in JSON format"),
        ]
        if state.get("method") in _METHODS_WITH_BODY:
            request.append(form_field(state, "body", "Request Body", "textarea",
                                      placeholder='{"key": "value"}',
                                      help_text="Request body data"))

        auth = [form_field(state, "authType", "Auth Type", "select", _AUTH_TYPES,
                           help_text="Authentication method")]
        auth_type = state.get("authType")
        if auth_type in ("api_key", "bearer"):
            auth.append(form_field(state, "apiKey", "API Key / Token", "password",
                                   placeholder="Enter your API key or token"))
        elif auth_type == "basic":
            auth += [
                form_field(state, "username", "Username", placeholder="Enter username"),
                form_field(state, "password", "Password", "password",
                           placeholder="Enter password"),
            ]

        return [
            Section(title="Request Configuration", fields=request),
            Section(title="Authentication", fields=auth),
            Section(title="Response Handling", fields=[
                form_field(state, "outputFormat", "Output Format", "select", _OUTPUT_FORMATS),
                form_field(state, "successCodes", "Success Status Codes",
                           placeholder="200,201,202",
                           help_text="Comma-separated list of successful HTTP status codes"),
            ]),
            Section(title="Advanced Options", collapsible=True, fields=[
                form_field(state, "timeout", "Timeout (ms)", "number"),
                form_field(state, "retryCount", "Retry Count", "number"),
                form_field(state, "rateLimit", "Rate Limiting", "select", _RATE_LIMITS),
                form_field(state, "cacheDuration", "Cache Duration (s)", "number",
                           help_text="Cache response for specified seconds (0 = no cache)"),
            ]),
        ]
