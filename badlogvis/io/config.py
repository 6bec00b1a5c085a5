# badlogvis/io/config.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class InputConfig:
    """
    Options controlling how an input dump is read.

    - trim_doubles: retry a numeric cell with exterior whitespace stripped
      (without it such a cell is not a number)
    - csv_only: the file is plain CSV, there is no JSON header line; every
      topic is unitless and carries no directives
    """
    trim_doubles: bool = False
    csv_only: bool = False
