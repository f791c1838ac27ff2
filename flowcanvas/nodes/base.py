"""Base node definitions for flowcanvas node kinds."""

from enum import Enum
from typing import Any, Literal, Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator


class NodeKind(str, Enum):
    """Every node kind the editor knows about, in palette order."""
    CUSTOM_INPUT = "customInput"
    LLM = "llm"
    CUSTOM_OUTPUT = "customOutput"
    TEXT = "text"
    WEB_SCRAPER = "webScraper"
    FILTER = "filter"
    TRANSFORMER = "transformer"
    AGGREGATOR = "aggregator"
    CONDITION = "condition"
    FLEXIBLE = "flexible"
    API_CONNECTOR = "apiConnector"
    CONDITIONAL = "conditional"
    DATA_TRANSFORMER = "dataTransformer"
    DATA_VALIDATOR = "dataValidator"
    FILE_PROCESSOR = "fileProcessor"


class Handle(BaseModel):
    """A named connection point on one edge of a node."""
    model_config = ConfigDict(frozen=True)

    id: str
    role: Literal["input", "output"]
    relative_position: float | None = Field(default=None, ge=0.0, le=1.0)


def input_handle(handle_id: str, position: float | None = None) -> Handle:
    return Handle(id=handle_id, role="input", relative_position=position)


def output_handle(handle_id: str, position: float | None = None) -> Handle:
    return Handle(id=handle_id, role="output", relative_position=position)


class NodeKindDescriptor(BaseModel):
    """Palette/canvas metadata for a node kind."""
    model_config = ConfigDict(frozen=True)

    kind: str                                        # e.g. "text"
    label: str                                       # e.g. "Text"
    icon: str                                        # lucide icon name
    accent_color: str                                # CSS colour
    category: str = "generic"                        # "input" | "compute" | "generic" | "output"
    description: str = ""


class Option(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: Any
    label: str


class FormField(BaseModel):
    """One control of a node's generated configuration form."""
    key: str
    label: str
    control: Literal["text", "textarea", "select", "number", "checkbox", "password"] = "text"
    value: Any = None
    options: list[Option] = Field(default_factory=list)
    placeholder: str | None = None
    help_text: str | None = None
    required: bool = False


class Section(BaseModel):
    """A titled group of form fields; collapsible sections can be folded away."""
    title: str
    collapsible: bool = False
    collapsed: bool = False
    fields: list[FormField] = Field(default_factory=list)
    notes: list[str] = Field(default_factory=list)


class NodeInstance(BaseModel):
    """A node placed on the canvas. ``data`` is its only durable state."""
    model_config = ConfigDict(extra="ignore")

    id: str = Field(min_length=1)
    kind: str
    data: dict[str, Any] = Field(default_factory=dict)

    @field_validator("data", mode="before")
    @classmethod
    def _none_is_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "id":
            raise AttributeError("NodeInstance.id is immutable")
        super().__setattr__(name, value)


def form_field(
    state: Mapping[str, Any],
    key: str,
    label: str,
    control: str = "text",
    options: Sequence[tuple[Any, str]] = (),
    **extra: Any,
) -> FormField:
    """Build a FormField whose value is read from live state."""
    return FormField(
        key=key,
        label=label,
        control=control,
        value=state.get(key),
        options=[Option(value=v, label=lbl) for v, lbl in options],
        **extra,
    )


class BaseNode:
    """Base class for all flowcanvas node kinds.

    Subclasses define a ``descriptor`` class attribute (NodeKindDescriptor)
    and a ``schema`` of configurable keys with their defaults, then override
    the port policy (``input_handles`` / ``output_handles``) and the form
    (``sections``) as needed. Nodes hold no per-instance state; every method
    is a pure function of the live state handed in.
    """

    descriptor: NodeKindDescriptor  # subclasses define this
    schema: dict[str, Any] = {}

    width: int = 200
    height: int = 80
    min_height: int = 80
    show_minimize: bool = True

    def defaults(self, node_id: str) -> dict[str, Any]:
        """Configuration defaults for a new node with the given id."""
        return dict(self.schema)

    def loose_defaults(self, data: Mapping[str, Any]) -> dict[str, Any]:
        """Defaults for persisted keys outside ``schema`` that the form still reads."""
        return {}

    def edit(self, state: Mapping[str, Any], key: str, value: Any) -> tuple[str, Any]:
        """Map a form edit onto the persisted key and value it changes."""
        return key, value

    def title(self, state: Mapping[str, Any]) -> str:
        return self.descriptor.label

    def description(self, state: Mapping[str, Any]) -> str | None:
        return self.descriptor.description or None

    def input_handles(self, state: Mapping[str, Any]) -> list[Handle]:
        return []

    def output_handles(self, state: Mapping[str, Any]) -> list[Handle]:
        return []

    def sections(self, state: Mapping[str, Any]) -> list[Section]:
        return []

    def size(self, state: Mapping[str, Any]) -> tuple[int, int, int]:
        """Return ``(width, nominal height, minimum height)``."""
        return self.width, self.height, self.min_height

    def warnings(self, state: Mapping[str, Any]) -> list[str]:
        return []
