from __future__ import annotations

from pathlib import Path
from typing import Any, Sequence

import numpy as np
from jinja2 import Environment, PackageLoader, select_autoescape
from markupsafe import Markup, escape

from badlogvis import __version__
from badlogvis.core import UNITLESS, Folder, Graph
from badlogvis.core.folder import hash_name

CDN_ASSETS = {
    "bootstrap_css": "https://cdn.jsdelivr.net/npm/bootstrap@3.4.1/dist/css/bootstrap.min.css",
    "jquery_js": "https://code.jquery.com/jquery-3.2.1.min.js",
    "bootstrap_js": "https://cdn.jsdelivr.net/npm/bootstrap@3.4.1/dist/js/bootstrap.min.js",
    "highcharts_js": "https://code.highcharts.com/highcharts.js",
    "boost_js": "https://code.highcharts.com/modules/boost.js",
    "exporting_js": "https://code.highcharts.com/modules/exporting.js",
    "offline_exporting_js": "https://code.highcharts.com/modules/offline-exporting.js",
}

_env = Environment(
    loader=PackageLoader("badlogvis.render", "templates"),
    autoescape=select_autoescape(enabled_extensions=("html", "j2")),
    trim_blocks=True,
    lstrip_blocks=True,
)
_env.filters["anchor"] = hash_name


def display_unit(unit: str | None) -> str:
    return unit if unit is not None else UNITLESS


def _finite_or_none(values: np.ndarray) -> list[float | None]:
    return [float(v) if np.isfinite(v) else None for v in values]


def _y_floor(graph: Graph) -> float | None:
    """0 when the graph asks for a zero baseline and all data sits above it."""
    if not graph.zero:
        return None
    ys = [s.y[np.isfinite(s.y)] for s in graph.series]
    ys = [y for y in ys if y.size]
    if not ys:
        return None
    min_y = float(min(y.min() for y in ys))
    return 0.0 if min_y > 0 else None


def chart_title(graph: Graph) -> str:
    base = str(escape(graph.name_base))
    if graph.virt:
        base = f"<i>{base}</i>"
    return f"{base} ({display_unit(graph.unit)})"


def chart_options(graph: Graph) -> dict[str, Any]:
    """Highcharts options for one graph. Non-finite points become gaps (null)."""
    y_axis: dict[str, Any] = {"title": {"text": display_unit(graph.unit)}}
    floor = _y_floor(graph)
    if floor is not None:
        y_axis["min"] = floor

    series = []
    for s in graph.series:
        series.append({
            "name": s.name if s.name is not None else graph.name_base,
            "data": [list(p) for p in zip(s.x.tolist(), _finite_or_none(s.y))],
        })

    return {
        "chart": {"type": "area" if graph.area else "line", "zoomType": "x"},
        "title": {"text": chart_title(graph)},
        "subtitle": {"text": graph.name},
        "xAxis": {"title": {"text": graph.x_unit}},
        "yAxis": y_axis,
        "legend": {"enabled": len(graph.series) > 1},
        "credits": {"enabled": False},
        "series": series,
    }


def render_folder(folder: Folder) -> Markup:
    charts = [(g, chart_options(g)) for g in folder.graphs]
    html = _env.get_template("folder.html.j2").render(folder=folder, charts=charts)
    return Markup(html)


def render_page(
    title: str,
    folders: Sequence[Folder],
    header_text: str | None = None,
    *,
    assets: dict[str, str] | None = None,
) -> str:
    return _env.get_template("page.html.j2").render(
        title=title,
        folders=[render_folder(f) for f in folders],
        header_text=header_text,
        assets=assets if assets is not None else CDN_ASSETS,
        version=__version__,
    )


def write_page(path: str | Path, html: str) -> Path:
    path = Path(path)
    path.write_text(html, encoding="utf-8")
    return path
