# badlogvis/core/folder.py
from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from typing import Iterable

from .channel import Log, Value
from .graph import Graph


_ASCII_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")


def ascii_lower(name: str) -> str:
    """Lowercase A-Z only; other characters compare by code point."""
    return name.translate(_ASCII_LOWER)


def hash_name(name: str) -> str:
    """Stable, DOM-safe identifier for a name."""
    return hashlib.sha1(name.encode("utf-8")).hexdigest()


@dataclass(slots=True)
class Folder:
    """Display bucket for everything sharing one ``name_folder``."""
    name: str
    values: list[Value] = field(default_factory=list)
    logs: list[Log] = field(default_factory=list)
    graphs: list[Graph] = field(default_factory=list)

    @property
    def is_root(self) -> bool:
        return not self.name

    @property
    def anchor(self) -> str:
        return hash_name(self.name)

    def __len__(self) -> int:
        return len(self.values) + len(self.logs) + len(self.graphs)


def build_groups(
    graphs: Iterable[Graph],
    values: Iterable[Value] = (),
    logs: Iterable[Log] = (),
) -> list[Folder]:
    """
    Partition graphs, values and logs by ``name_folder``.

    Folders are created on first occurrence and members keep input order;
    the returned list is sorted by folder name, ignoring ASCII case only.
    """
    folders: dict[str, Folder] = {}

    def folder_for(name: str) -> Folder:
        folder = folders.get(name)
        if folder is None:
            folder = folders[name] = Folder(name=name)
        return folder

    for graph in graphs:
        folder_for(graph.name_folder).graphs.append(graph)
    for value in values:
        folder_for(value.name_folder).values.append(value)
    for log in logs:
        folder_for(log.name_folder).logs.append(log)

    return sorted(folders.values(), key=lambda f: ascii_lower(f.name))
