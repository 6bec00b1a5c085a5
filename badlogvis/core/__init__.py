"""
Core domain objects for badlogvis.

This module defines the format-agnostic model and the derivation engine:
- Topic / Log / Value: parsed input records
- Attribute: topic directives (hide, area, xaxis, join:<name>, ...)
- Series: validated (x, y) point sequence + numeric transforms
- XAxis: the shared x-axis of a run
- Graph: renderable chart, produced by derive_graphs
- Folder: display group, produced by build_groups

The core layer is independent from file parsing and HTML rendering.
"""

from .attribute import Attribute, AttributeKind, parse_attribute, parse_attributes
from .channel import UNITLESS, Log, Topic, Value, split_name
from .diagnostics import Diagnostic, Diagnostics
from .series import Series, bind_axis, delta, differentiate, fake_x_axis, integrate
from .xaxis import XAxis, select_xaxis
from .graph import Graph, derive_graphs, resolve_joins
from .folder import Folder, build_groups
from .exceptions import (
    CoreError,
    InvalidSeries,
    InvalidChannel,
    InvalidValue,
    InvalidDirective,
    AmbiguousXAxis,
    InvalidJoin,
    InputError,
    UnrecognizedAttribute,
    TopicNotFound,
)


__all__ = [
    # directives
    "Attribute",
    "AttributeKind",
    "parse_attribute",
    "parse_attributes",

    # records
    "UNITLESS",
    "Topic",
    "Log",
    "Value",
    "split_name",

    # diagnostics
    "Diagnostic",
    "Diagnostics",

    # numeric transforms
    "Series",
    "bind_axis",
    "fake_x_axis",
    "differentiate",
    "delta",
    "integrate",

    # derivation
    "XAxis",
    "select_xaxis",
    "Graph",
    "derive_graphs",
    "resolve_joins",
    "Folder",
    "build_groups",

    # exceptions
    "CoreError",
    "InvalidSeries",
    "InvalidChannel",
    "InvalidValue",
    "InvalidDirective",
    "AmbiguousXAxis",
    "InvalidJoin",
    "InputError",
    "UnrecognizedAttribute",
    "TopicNotFound",
]
