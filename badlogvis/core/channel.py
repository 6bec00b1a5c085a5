# badlogvis/core/channel.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

import numpy as np

from .attribute import Attribute, AttributeKind
from .exceptions import InvalidChannel, InvalidValue

if TYPE_CHECKING:
    from .xaxis import XAxis

# Display marker for a missing unit; only the presentation layer emits it.
UNITLESS = "ul"

NAME_SEPARATOR = "/"


def split_name(name: str) -> tuple[str, str]:
    """
    Split a hierarchical name on its last separator.

    "a/b/c" -> ("a/b", "c")
    "c"     -> ("", "c")
    """
    folder, sep, base = name.rpartition(NAME_SEPARATOR)
    if not sep:
        return "", name
    return folder, base


def normalize_unit(unit: str | None) -> str | None:
    return unit if unit else None


def format_number(value: float) -> str:
    """Shortest positional rendering: 1.0 -> "1", 0.25 -> "0.25"."""
    return np.format_float_positional(float(value), trim="-")


def _check_name(cls_name: str, name: object) -> None:
    if not isinstance(name, str) or not name:
        raise InvalidChannel(f"{cls_name}.name must be a non-empty string.")


@dataclass(frozen=True, slots=True)
class Topic:
    """
    A named numeric channel: one sample per input row.

    ``unit`` is None when the source left it empty; ``attrs`` is the parsed,
    de-duplicated directive tuple.
    """
    name: str
    unit: str | None = None
    attrs: tuple[Attribute, ...] = ()
    data: np.ndarray = field(default_factory=lambda: np.empty(0), repr=False)

    name_folder: str = field(init=False, repr=False)
    name_base: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        _check_name("Topic", self.name)

        d = np.asarray(self.data, dtype=float)
        if d.ndim != 1:
            raise InvalidChannel(f"Topic {self.name!r} data must be 1D, got shape {d.shape}")

        folder, base = split_name(self.name)
        object.__setattr__(self, "name_folder", folder)
        object.__setattr__(self, "name_base", base)
        object.__setattr__(self, "unit", normalize_unit(self.unit))
        object.__setattr__(self, "attrs", tuple(self.attrs))
        object.__setattr__(self, "data", d)

    @property
    def n(self) -> int:
        return int(self.data.size)

    def has(self, kind: AttributeKind) -> bool:
        return any(a.kind is kind for a in self.attrs)

    @property
    def join_targets(self) -> list[str]:
        return [a.target for a in self.attrs if a.kind is AttributeKind.JOIN]

    @property
    def hide_only(self) -> bool:
        """True when the topic produces nothing, so its cells need not be parsed."""
        return self.attrs == (Attribute(AttributeKind.HIDE),)

    def with_data(self, data: np.ndarray) -> "Topic":
        return Topic(name=self.name, unit=self.unit, attrs=self.attrs, data=data)


@dataclass(frozen=True, slots=True)
class Log:
    """
    A text channel: only the cells that are not numeric are kept.

    ``entries`` holds ``(row_index, text)`` pairs; ``lines`` stays None until
    ``apply_xaxis`` renders them against the resolved x-axis.
    """
    name: str
    unit: str | None = None
    attrs: tuple[Attribute, ...] = (Attribute(AttributeKind.LOG),)
    entries: tuple[tuple[int, str], ...] = ()
    lines: tuple[str, ...] | None = None

    name_folder: str = field(init=False, repr=False)
    name_base: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        _check_name("Log", self.name)
        if tuple(self.attrs) != (Attribute(AttributeKind.LOG),):
            extra = ", ".join(str(a) for a in self.attrs)
            raise InvalidChannel(
                f"Log topic {self.name!r} must have the log attribute only, got [{extra}]"
            )
        folder, base = split_name(self.name)
        object.__setattr__(self, "name_folder", folder)
        object.__setattr__(self, "name_base", base)
        object.__setattr__(self, "unit", normalize_unit(self.unit))
        object.__setattr__(self, "attrs", tuple(self.attrs))
        object.__setattr__(self, "entries", tuple(self.entries))

    def apply_xaxis(self, xaxis: "XAxis") -> "Log":
        lines: list[str] = []
        for row, text in self.entries:
            if not text:
                continue
            if xaxis.data is not None:
                prefix = format_number(xaxis.data[row])
                if xaxis.unit is not None:
                    prefix = f"{prefix} {xaxis.unit}"
            else:
                prefix = str(row)
            lines.append(f"[{prefix}] {text}")
        return replace(self, lines=tuple(lines))


@dataclass(frozen=True, slots=True)
class Value:
    """A free-standing name/value pair shown in a folder's table."""
    name: str
    value: str

    name_folder: str = field(init=False, repr=False)
    name_base: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise InvalidValue("Value.name must be a non-empty string.")
        folder, base = split_name(self.name)
        object.__setattr__(self, "name_folder", folder)
        object.__setattr__(self, "name_base", base)
