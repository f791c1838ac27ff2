"""Errors and non-fatal diagnostics raised or reported by flowcanvas."""

from pydantic import BaseModel, ConfigDict, Field, computed_field


class FlowCanvasError(Exception):
    """Base class for all flowcanvas errors."""


class UnknownNodeKind(FlowCanvasError, KeyError):
    """A registry lookup referenced a kind that was never registered."""

    def __init__(self, kind: str):
        super().__init__(kind)
        self.kind = kind

    def __str__(self) -> str:
        return f"Unknown node kind: {self.kind!r}"


class InvalidDragPayload(FlowCanvasError, ValueError):
    """A palette drag payload could not be decoded."""


class MalformedVariableReference(BaseModel):
    """Inline warning for ``{{...}}`` references whose payload is not an identifier."""
    model_config = ConfigDict(frozen=True)

    names: tuple[str, ...] = Field(default_factory=tuple)

    @computed_field
    @property
    def message(self) -> str:
        shown = ", ".join(repr(n) for n in self.names)
        return f"Invalid variable names: {shown}"


class StaleHandleReference(BaseModel):
    """An edge that points at a handle the node no longer exposes."""
    model_config = ConfigDict(frozen=True)

    edge_id: str | None = None
    node_id: str
    handle_id: str
    role: str  # "input" | "output"
