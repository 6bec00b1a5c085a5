# badlogvis/core/attribute.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from .diagnostics import DUPLICATE_ATTRIBUTE, UNKNOWN_ATTRIBUTE, Diagnostics
from .exceptions import InvalidDirective, UnrecognizedAttribute

JOIN_PREFIX = "join:"


class AttributeKind(Enum):
    HIDE = "hide"
    AREA = "area"
    XAXIS = "xaxis"
    DIFFERENTIATE = "differentiate"
    DELTA = "delta"
    INTEGRATE = "integrate"
    ZERO = "zero"
    LOG = "log"
    JOIN = "join"


_EXACT_TOKENS = {
    kind.value: kind for kind in AttributeKind if kind is not AttributeKind.JOIN
}


@dataclass(frozen=True, slots=True)
class Attribute:
    """
    A parsed topic directive.

    Only JOIN carries a payload (``target``, the name of the combined graph).
    Two attributes are equal when kind and target are equal, so one topic may
    join several different targets.
    """
    kind: AttributeKind
    target: str | None = None

    def __str__(self) -> str:
        if self.kind is AttributeKind.JOIN:
            return f"{JOIN_PREFIX}{self.target}"
        return self.kind.value


def parse_attribute(token: str) -> Attribute:
    """
    Parse a single directive token.

    Raises
    ------
    InvalidDirective
        ``join:`` with an empty target.
    UnrecognizedAttribute
        Any token that is not a known directive.
    """
    kind = _EXACT_TOKENS.get(token)
    if kind is not None:
        return Attribute(kind)

    if token.startswith(JOIN_PREFIX):
        target = token[len(JOIN_PREFIX):]
        if not target:
            raise InvalidDirective(f"Join directive {token!r} has no target name.")
        return Attribute(AttributeKind.JOIN, target)

    raise UnrecognizedAttribute(token)


def parse_attributes(
    tokens: Iterable[str],
    topic_name: str,
    diagnostics: Diagnostics | None = None,
) -> tuple[Attribute, ...]:
    """Parse a topic's directive list, dropping unknown tokens and duplicates (first wins)."""
    if diagnostics is None:
        diagnostics = Diagnostics()

    attrs: list[Attribute] = []
    for token in tokens:
        try:
            attr = parse_attribute(token)
        except UnrecognizedAttribute:
            diagnostics.warn(
                UNKNOWN_ATTRIBUTE,
                f"Failed to parse attribute {token}, skipping it",
                subject=topic_name,
            )
            continue

        if attr in attrs:
            diagnostics.warn(
                DUPLICATE_ATTRIBUTE,
                f'Duplicate attribute "{token}" on topic {topic_name}, ignoring duplicate',
                subject=topic_name,
            )
            continue
        attrs.append(attr)

    return tuple(attrs)
