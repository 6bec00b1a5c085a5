# badlogvis/core/series.py
from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from .exceptions import InvalidSeries


@dataclass(frozen=True, slots=True)
class Series:
    """Immutable (x, y) point sequence: two aligned 1D float vectors."""

    x: np.ndarray = field(repr=False)
    y: np.ndarray = field(repr=False)
    name: str | None = None

    def __post_init__(self) -> None:
        x = np.asarray(self.x, dtype=float)
        y = np.asarray(self.y, dtype=float)

        if x.ndim != 1:
            raise InvalidSeries(f"`x` must be 1D, got shape {x.shape}")
        if y.ndim != 1:
            raise InvalidSeries(f"`y` must be 1D, got shape {y.shape}")
        if x.size != y.size:
            raise InvalidSeries(
                f"`x` and `y` must have same length, got {x.size} vs {y.size}"
            )

        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    @property
    def n(self) -> int:
        return int(self.x.size)

    def __len__(self) -> int:
        return self.n

    def points(self) -> list[tuple[float, float]]:
        return [(float(a), float(b)) for a, b in zip(self.x, self.y)]


def bind_axis(x: np.ndarray, y: np.ndarray, name: str | None = None) -> Series:
    """Pair every sample of ``y`` with the matching x-axis value."""
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    if x.size != y.size:
        raise InvalidSeries(
            f"Cannot bind {name or 'series'} to the x-axis: "
            f"axis has {x.size} samples, data has {y.size}"
        )
    return Series(x=x, y=y, name=name)


def fake_x_axis(y: np.ndarray, name: str | None = None) -> Series:
    """Bind ``y`` to the row index 0..n-1."""
    y = np.asarray(y, dtype=float)
    return Series(x=np.arange(y.size, dtype=float), y=y, name=name)


def _midpoints(series: Series) -> np.ndarray:
    return (series.x[:-1] + series.x[1:]) / 2.0


def differentiate(series: Series) -> Series:
    """
    Finite-difference slope between neighbours, placed at the x midpoint.

    n points give n-1 slopes; fewer than two points give an empty series.
    Coincident x values are not trapped: the slope becomes inf or nan.
    """
    if series.n < 2:
        return Series(x=np.empty(0), y=np.empty(0))
    with np.errstate(divide="ignore", invalid="ignore"):
        slope = np.diff(series.y) / np.diff(series.x)
    return Series(x=_midpoints(series), y=slope)


def delta(series: Series) -> Series:
    """Raw successive difference ``y2 - y1`` placed at the x midpoint."""
    if series.n < 2:
        return Series(x=np.empty(0), y=np.empty(0))
    return Series(x=_midpoints(series), y=np.diff(series.y))


def integrate(series: Series) -> tuple[Series, float]:
    """
    Cumulative trapezoidal integral.

    The running area after each interval is emitted at the interval's left
    x value, so n points give n-1 outputs. Returns the cumulative series and
    the total area, which always equals the last cumulative value (0.0 when
    there are fewer than two points).
    """
    if series.n < 2:
        return Series(x=np.empty(0), y=np.empty(0)), 0.0
    areas = (series.y[:-1] + series.y[1:]) / 2.0 * np.diff(series.x)
    cumulative = np.cumsum(areas)
    return Series(x=series.x[:-1], y=cumulative), float(cumulative[-1])
