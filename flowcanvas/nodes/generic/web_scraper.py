"""Web Scraper node — fetches content from a URL."""

from typing import Any, Mapping

from flowcanvas.nodes.base import (
    BaseNode, Handle, NodeKind, NodeKindDescriptor, Section, form_field,
    input_handle, output_handle,
)

_METHODS = [(m, m) for m in ("GET", "POST", "PUT", "DELETE")]


class WebScraperNode(BaseNode):
    descriptor = NodeKindDescriptor(
        kind=NodeKind.WEB_SCRAPER.value,
        label="Web Scraper",
        icon="globe",
        accent_color="#84cc16",
        category="generic",
    )
    schema = {"url": "", "method": "GET", "headers": "{}", "timeout": "5000"}

    def input_handles(self, state: Mapping[str, Any]) -> list[Handle]:
        return [input_handle("trigger")]

    def output_handles(self, state: Mapping[str, Any]) -> list[Handle]:
        return [output_handle("content"), output_handle("status")]

    def sections(self, state: Mapping[str, Any]) -> list[Section]:
        return [Section(title="Request", fields=[
            form_field(state, "url", "URL", placeholder="https://example.com"),
            form_field(state, "method", "Method", "select", _METHODS),
            form_field(state, "headers", "Headers (JSON)",
                       placeholder='{"Content-Type": "application/json"}'),
            form_field(state, "timeout", "Timeout (ms)", "number"),
        ])]
