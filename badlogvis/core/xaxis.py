# badlogvis/core/xaxis.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from .attribute import AttributeKind
from .channel import Topic
from .exceptions import AmbiguousXAxis
from .series import Series, bind_axis, fake_x_axis

INDEX_NAME = "Index"


@dataclass(frozen=True, slots=True)
class XAxis:
    """
    The x-axis shared by every graph of a run.

    ``data`` is None for the synthetic row-index axis.
    """
    name: str = INDEX_NAME
    unit: str | None = None
    data: np.ndarray | None = field(default=None, repr=False)

    @property
    def synthetic(self) -> bool:
        return self.data is None

    def bind(self, y: np.ndarray, name: str | None = None) -> Series:
        if self.data is None:
            return fake_x_axis(y, name=name)
        return bind_axis(self.data, y, name=name)


def select_xaxis(topics: Sequence[Topic]) -> XAxis:
    """
    Resolve the run's x-axis from the single topic tagged ``xaxis``.

    The axis topic stays in ``topics`` and still gets its own graph unless
    hidden. Raises AmbiguousXAxis when more than one topic is tagged.
    """
    tagged = [t for t in topics if t.has(AttributeKind.XAXIS)]

    if len(tagged) > 1:
        names = ", ".join(t.name for t in tagged)
        raise AmbiguousXAxis(f"Multiple topics with xaxis attribute: {names}")

    if not tagged:
        return XAxis()

    topic = tagged[0]
    label = topic.name_base if topic.unit is None else f"{topic.name_base} ({topic.unit})"
    return XAxis(name=label, unit=topic.unit, data=topic.data)
