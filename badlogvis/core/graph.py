# badlogvis/core/graph.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Sequence

from .attribute import AttributeKind
from .channel import Topic, split_name
from .diagnostics import JOIN_LABEL_COLLISION, JOIN_UNIT_MISMATCH, Diagnostics
from .exceptions import InvalidChannel, InvalidJoin
from .series import Series, delta, differentiate, integrate
from .xaxis import XAxis, select_xaxis
from badlogvis.utils.logging import get_logger

logger = get_logger(__name__)

DELTA_SUFFIX = " Delta"
DERIVATIVE_SUFFIX = " Derivative"
INTEGRAL_SUFFIX = " Integral"


@dataclass(frozen=True, slots=True)
class Graph:
    """
    One chart: one or more series sharing a unit and the run's x-axis.

    ``virt`` marks generated graphs (delta/derivative/integral/join target);
    ``joinable`` is only set on graphs created to host join directives.
    """
    name: str
    unit: str | None
    x_unit: str
    series: tuple[Series, ...]
    area: bool = False
    virt: bool = False
    joinable: bool = False
    zero: bool = False

    name_folder: str = field(init=False, repr=False)
    name_base: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        folder, base = split_name(self.name)
        object.__setattr__(self, "name_folder", folder)
        object.__setattr__(self, "name_base", base)
        object.__setattr__(self, "series", tuple(self.series))

    def series_names(self) -> list[str | None]:
        return [s.name for s in self.series]

    def with_series(self, series: Series) -> "Graph":
        return replace(self, series=self.series + (series,))


def derivative_unit(unit: str | None, x_unit: str | None) -> str | None:
    if x_unit is None:
        return unit
    return f"{unit if unit is not None else '1'}/{x_unit}"


def integral_unit(unit: str | None, x_unit: str | None) -> str | None:
    if unit is None or x_unit is None:
        return unit if x_unit is None else x_unit
    return f"{unit}*{x_unit}"


def _check_unique_names(topics: Sequence[Topic]) -> None:
    seen: set[str] = set()
    for topic in topics:
        if topic.name in seen:
            raise InvalidChannel(f"Duplicate topic {topic.name!r}")
        seen.add(topic.name)


def _topic_graphs(topic: Topic, xaxis: XAxis) -> list[Graph]:
    """Graphs produced by one topic on its own; each directive is checked independently."""
    graphs: list[Graph] = []
    needs_data = not topic.has(AttributeKind.HIDE) or any(
        topic.has(k)
        for k in (AttributeKind.DELTA, AttributeKind.DIFFERENTIATE, AttributeKind.INTEGRATE)
    )
    if not needs_data:
        return graphs

    bound = xaxis.bind(topic.data)

    if not topic.has(AttributeKind.HIDE):
        graphs.append(
            Graph(
                name=topic.name,
                unit=topic.unit,
                x_unit=xaxis.name,
                series=(bound,),
                area=topic.has(AttributeKind.AREA),
                zero=topic.has(AttributeKind.ZERO),
            )
        )

    if topic.has(AttributeKind.DELTA):
        graphs.append(
            Graph(
                name=topic.name + DELTA_SUFFIX,
                unit=topic.unit,
                x_unit=xaxis.name,
                series=(delta(bound),),
                virt=True,
            )
        )

    if topic.has(AttributeKind.DIFFERENTIATE):
        graphs.append(
            Graph(
                name=topic.name + DERIVATIVE_SUFFIX,
                unit=derivative_unit(topic.unit, xaxis.unit),
                x_unit=xaxis.name,
                series=(differentiate(bound),),
                virt=True,
            )
        )

    if topic.has(AttributeKind.INTEGRATE):
        cumulative, total = integrate(bound)
        logger.debug("Integral of %s: total area %s", topic.name, total)
        graphs.append(
            Graph(
                name=topic.name + INTEGRAL_SUFFIX,
                unit=integral_unit(topic.unit, xaxis.unit),
                x_unit=xaxis.name,
                series=(cumulative,),
                virt=True,
            )
        )

    return graphs


def resolve_joins(
    graphs: Sequence[Graph],
    topics: Sequence[Topic],
    xaxis: XAxis,
    diagnostics: Diagnostics | None = None,
) -> list[Graph]:
    """
    Fold every ``join:<target>`` directive into the graph list.

    Targets are looked up by exact name; when several graphs share a name the
    last one registered is used. A missing target is created as a joinable
    graph with the unit of the first topic that joins it; any other existing
    graph with that name cannot be joined into.
    """
    if diagnostics is None:
        diagnostics = Diagnostics()

    out = list(graphs)
    index: dict[str, int] = {}
    for i, g in enumerate(out):
        index[g.name] = i

    for topic in topics:
        for target in topic.join_targets:
            series = xaxis.bind(topic.data, name=topic.name_base)

            pos = index.get(target)
            if pos is None:
                out.append(
                    Graph(
                        name=target,
                        unit=topic.unit,
                        x_unit=xaxis.name,
                        series=(series,),
                        virt=True,
                        joinable=True,
                    )
                )
                index[target] = len(out) - 1
                continue

            host = out[pos]
            if not host.joinable:
                raise InvalidJoin(
                    f"Topic {topic.name!r} cannot join {target!r}: "
                    "a graph with that name already exists and is not a join target"
                )

            if topic.name_base in host.series_names():
                diagnostics.warn(
                    JOIN_LABEL_COLLISION,
                    f"Join target {target} already has a series named {topic.name_base}",
                    subject=topic.name,
                )
            if host.unit != topic.unit:
                diagnostics.warn(
                    JOIN_UNIT_MISMATCH,
                    f"Joining {topic.name} ({topic.unit}) into {target} ({host.unit}) "
                    "with different units",
                    subject=topic.name,
                )
            out[pos] = host.with_series(series)

    return out


def derive_graphs(
    topics: Sequence[Topic],
    diagnostics: Diagnostics | None = None,
) -> tuple[list[Graph], XAxis]:
    """
    Turn numeric topics into graphs.

    The x-axis is resolved first and shared by everything. Per-topic graphs
    are emitted in topic order (direct, delta, derivative, integral); join
    directives are resolved afterwards, once every per-topic graph exists.
    """
    if diagnostics is None:
        diagnostics = Diagnostics()

    _check_unique_names(topics)
    xaxis = select_xaxis(topics)

    graphs: list[Graph] = []
    for topic in topics:
        graphs.extend(_topic_graphs(topic, xaxis))

    return resolve_joins(graphs, topics, xaxis, diagnostics), xaxis
