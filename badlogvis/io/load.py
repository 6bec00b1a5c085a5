from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from badlogvis.core import (
    Diagnostics,
    Folder,
    InputError,
    XAxis,
    build_groups,
    derive_graphs,
)

from .config import InputConfig
from .input import Input, parse_input


@dataclass
class Report:
    """Folders ready for rendering plus the run's x-axis and warnings."""
    folders: list[Folder]
    xaxis: XAxis
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


def load_input(
    path: str | Path,
    config: InputConfig | None = None,
    diagnostics: Diagnostics | None = None,
) -> Input:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f'Failed to open file "{path}": {e}') from e
    return parse_input(text, config, diagnostics)


def build_report(data: Input, diagnostics: Diagnostics | None = None) -> Report:
    """Derive graphs, render log lines against the x-axis, then group everything."""
    if diagnostics is None:
        diagnostics = Diagnostics()

    graphs, xaxis = derive_graphs(data.topics, diagnostics)
    logs = [log.apply_xaxis(xaxis) for log in data.logs]
    folders = build_groups(graphs, data.values, logs)
    return Report(folders=folders, xaxis=xaxis, diagnostics=diagnostics)


def load_report(
    path: str | Path,
    config: InputConfig | None = None,
) -> Report:
    diagnostics = Diagnostics()
    data = load_input(path, config, diagnostics)
    return build_report(data, diagnostics)
