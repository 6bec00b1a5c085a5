from __future__ import annotations

import csv
import io
import json
from dataclasses import dataclass, field
from typing import Any, Iterator

import numpy as np
import pandas as pd

from badlogvis.core import (
    Attribute,
    AttributeKind,
    Diagnostics,
    InputError,
    InvalidChannel,
    InvalidValue,
    Log,
    Topic,
    TopicNotFound,
    Value,
    parse_attributes,
)
from badlogvis.core.diagnostics import DUPLICATE_VALUE, NAME_WHITESPACE
from badlogvis.utils.logging import get_logger

from .config import InputConfig

logger = get_logger(__name__)


@dataclass
class Input:
    """
    Everything read from one dump, before derivation.

    ``header_text`` is the raw JSON header line (None in CSV-only mode).
    """

    topics: list[Topic] = field(default_factory=list)
    values: list[Value] = field(default_factory=list)
    logs: list[Log] = field(default_factory=list)
    header_text: str | None = None

    @property
    def n_rows(self) -> int:
        return max((t.n for t in self.topics), default=0)

    def __iter__(self) -> Iterator[str]:
        for t in self.topics:
            yield t.name
        for log in self.logs:
            yield log.name

    def __contains__(self, name: object) -> bool:
        return any(n == name for n in self)

    def __getitem__(self, name: str) -> Topic | Log:
        for item in (*self.topics, *self.logs):
            if item.name == name:
                return item
        raise TopicNotFound(name)


# ---------------------------------------------------------------------------
# Cell parsing
# ---------------------------------------------------------------------------
def _strict_float(text: str) -> float:
    # float() is more lenient than the logger's number syntax
    if text != text.strip() or "_" in text:
        raise ValueError(f"not a number: {text!r}")
    return float(text)


def parse_double(text: str, *, trim: bool = False) -> float:
    """
    Parse one numeric cell.

    Exterior whitespace makes a cell non-numeric unless ``trim`` is set, in
    which case one more attempt is made on the stripped text.
    """
    try:
        return _strict_float(text)
    except ValueError:
        if not trim:
            raise
    return _strict_float(text.strip())


# ---------------------------------------------------------------------------
# Header
# ---------------------------------------------------------------------------
def split_header(text: str) -> tuple[str, str]:
    """Split a dump into its JSON header line and the CSV body."""
    header_line, _, csv_text = text.partition("\n")
    return header_line.rstrip("\r"), csv_text


def parse_header(header_line: str) -> dict[str, Any]:
    try:
        header = json.loads(header_line)
    except json.JSONDecodeError as e:
        raise InputError(
            f"Failed to parse json header: {e} (if it is a CSV file use --csv)"
        ) from e

    if not isinstance(header, dict):
        raise InputError("JSON header must be an object with 'topics' and 'values'")
    topics = header.get("topics", [])
    values = header.get("values", [])
    if not isinstance(topics, list) or not isinstance(values, list):
        raise InputError("JSON header 'topics' and 'values' must be lists")
    return {"topics": topics, "values": values}


def _header_entry(entry: Any, kind: str) -> dict[str, Any]:
    if not isinstance(entry, dict) or not isinstance(entry.get("name"), str):
        raise InputError(f"Every JSON header {kind} needs a string 'name', got {entry!r}")
    return entry


def topics_from_header(
    header: dict[str, Any],
    diagnostics: Diagnostics,
) -> list[Topic | Log]:
    """Build empty topics/logs from the header; data is filled from the CSV body."""
    out: list[Topic | Log] = []
    seen: set[str] = set()
    for raw in header["topics"]:
        entry = _header_entry(raw, "topic")
        name = entry["name"]
        if name in seen:
            raise InvalidChannel(f"Duplicate topic entry in JSON header for {name}")
        seen.add(name)

        attrs = parse_attributes(entry.get("attrs", []), name, diagnostics)
        unit = entry.get("unit") or None
        if Attribute(AttributeKind.LOG) in attrs:
            out.append(Log(name=name, unit=unit, attrs=attrs))
        else:
            out.append(Topic(name=name, unit=unit, attrs=attrs))
    return out


def values_from_header(header: dict[str, Any], diagnostics: Diagnostics) -> list[Value]:
    """Header values; a repeated name must repeat the same value."""
    values: dict[str, Value] = {}
    for raw in header["values"]:
        entry = _header_entry(raw, "value")
        value = Value(name=entry["name"], value=str(entry.get("value", "")))
        duplicate = values.get(value.name)
        if duplicate is not None:
            if duplicate.value != value.value:
                raise InvalidValue(f"Duplicate value {value.name} with different values")
            diagnostics.warn(
                DUPLICATE_VALUE,
                f"Duplicate value {value.name}, ignoring duplicate",
                subject=value.name,
            )
            continue
        values[value.name] = value
    return list(values.values())


def topics_from_csv_header(columns: list[str], diagnostics: Diagnostics) -> list[Topic]:
    topics: list[Topic] = []
    seen: set[str] = set()
    for name in columns:
        if name != name.strip():
            diagnostics.warn(
                NAME_WHITESPACE,
                f'Topic "{name}" has exterior whitespace',
                subject=name,
            )
        if name in seen:
            raise InvalidChannel(f"Duplicate topic entry in CSV header for {name}")
        seen.add(name)
        topics.append(Topic(name=name))
    return topics


# ---------------------------------------------------------------------------
# CSV body
# ---------------------------------------------------------------------------
def check_row_widths(csv_text: str) -> None:
    """
    Every data row must have exactly as many fields as the header row.

    pandas pads short rows with empty cells, which are then indistinguishable
    from real empty cells, so widths are checked on the raw records.
    """
    width: int | None = None
    row = 0
    for record in csv.reader(io.StringIO(csv_text)):
        if not record:
            continue
        if width is None:
            width = len(record)
            continue
        if len(record) != width:
            relation = "fewer" if len(record) < width else "more"
            raise InputError(
                f"CSV row {row} has {relation} fields ({len(record)}) "
                f"than the header ({width})"
            )
        row += 1


def read_matrix(csv_text: str) -> tuple[list[str], pd.DataFrame]:
    """
    Read the CSV body as strings.

    Returns the header names and a frame of raw cells, one column per
    header name (positional columns, so duplicate names survive).
    """
    check_row_widths(csv_text)
    try:
        frame = pd.read_csv(
            io.StringIO(csv_text),
            header=None,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
        )
    except pd.errors.EmptyDataError as e:
        raise InputError("CSV data has no header row") from e
    except pd.errors.ParserError as e:
        raise InputError(f"Malformed CSV data: {e}") from e

    columns = [str(c) for c in frame.iloc[0].tolist()]
    rows = frame.iloc[1:].reset_index(drop=True)
    return columns, rows


def _numeric_column(topic: Topic, cells: list[str], trim: bool) -> np.ndarray:
    data = np.empty(len(cells), dtype=float)
    for i, cell in enumerate(cells):
        try:
            data[i] = parse_double(cell, trim=trim)
        except ValueError as e:
            hint = "" if trim else " (maybe try --trim-doubles or hide topic)"
            raise InputError(
                f'Failed to parse "{cell}" as a double in topic {topic.name}, row {i}{hint}'
            ) from e
    return data


def _log_entries(cells: list[str], trim: bool) -> tuple[tuple[int, str], ...]:
    entries: list[tuple[int, str]] = []
    for i, cell in enumerate(cells):
        try:
            parse_double(cell, trim=trim)
        except ValueError:
            entries.append((i, cell))
    return tuple(entries)


def parse_input(
    text: str,
    config: InputConfig | None = None,
    diagnostics: Diagnostics | None = None,
) -> Input:
    """Parse a whole dump (header line + CSV body, or plain CSV) into an Input."""
    if config is None:
        config = InputConfig()
    if diagnostics is None:
        diagnostics = Diagnostics()

    if config.csv_only:
        header_text = None
        columns, rows = read_matrix(text)
        declared: list[Topic | Log] = list(topics_from_csv_header(columns, diagnostics))
        values: list[Value] = []
    else:
        header_text, csv_text = split_header(text)
        header = parse_header(header_text)
        declared = topics_from_header(header, diagnostics)
        values = values_from_header(header, diagnostics)
        columns, rows = read_matrix(csv_text)

    by_name = {item.name: item for item in declared}
    column_of: dict[str, int] = {}
    for pos, name in enumerate(columns):
        if name not in by_name:
            raise InputError(f"Can't find topic {name} in JSON header")
        if name in column_of:
            raise InvalidChannel(f"Duplicate topic entry in CSV header for {name}")
        column_of[name] = pos

    topics: list[Topic] = []
    logs: list[Log] = []
    for item in declared:
        pos = column_of.get(item.name)
        if pos is None:
            raise InputError(f"Topic {item.name} has no column in the CSV data")
        cells = rows.iloc[:, pos].tolist()

        if isinstance(item, Log):
            logs.append(Log(name=item.name, unit=item.unit, attrs=item.attrs,
                            entries=_log_entries(cells, config.trim_doubles)))
        elif item.hide_only:
            # nothing is derived from it, so its cells are not inspected
            topics.append(item)
        else:
            topics.append(item.with_data(_numeric_column(item, cells, config.trim_doubles)))

    logger.debug(
        "Parsed %d topics, %d logs, %d values over %d rows",
        len(topics), len(logs), len(values), len(rows),
    )
    return Input(topics=topics, values=values, logs=logs, header_text=header_text)
