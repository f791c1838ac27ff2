"""Variable parser — finds ``{{name}}`` references in free text."""

import re
from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from flowcanvas.errors import MalformedVariableReference

# Payload may not contain braces, so "{{{a}}" yields "a" (nearest opening marker).
VARIABLE_RE = re.compile(r"\{\{([^{}]*)\}\}")
IDENTIFIER_RE = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")


class VariableToken(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    valid: bool


class VariableParse(BaseModel):
    """Result of scanning one text body.

    ``tokens`` holds every match in text order, ``candidates`` the distinct
    valid names in first-seen order, ``invalid`` every rejected payload in
    match order (duplicates kept).
    """
    model_config = ConfigDict(frozen=True)

    tokens: tuple[VariableToken, ...] = ()
    candidates: tuple[str, ...] = ()
    invalid: tuple[str, ...] = ()

    @property
    def has_invalid(self) -> bool:
        return bool(self.invalid)

    def warning(self) -> MalformedVariableReference | None:
        if not self.invalid:
            return None
        return MalformedVariableReference(names=self.invalid)


def is_identifier(name: str) -> bool:
    return IDENTIFIER_RE.fullmatch(name) is not None


@lru_cache(maxsize=256)
def _parse(text: str) -> VariableParse:
    tokens: list[VariableToken] = []
    seen: dict[str, None] = {}
    invalid: list[str] = []
    for match in VARIABLE_RE.finditer(text):
        name = match.group(1)
        valid = is_identifier(name)
        tokens.append(VariableToken(name=name, valid=valid))
        if valid:
            seen.setdefault(name, None)
        else:
            invalid.append(name)
    return VariableParse(
        tokens=tuple(tokens),
        candidates=tuple(seen),
        invalid=tuple(invalid),
    )


def parse_variables(text: str | None) -> VariableParse:
    """Parse ``text`` from scratch. Results for identical text are shared.

    Anything that is not a string parses as empty text.
    """
    if not isinstance(text, str):
        text = ""
    return _parse(text)
