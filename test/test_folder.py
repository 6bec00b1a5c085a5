# test/test_folder.py
import hashlib

import numpy as np

from badlogvis.core import Folder, Graph, Log, Value, build_groups, fake_x_axis
from badlogvis.core.folder import ascii_lower


def graph(name):
    return Graph(name=name, unit=None, x_unit="Index", series=(fake_x_axis(np.array([1.0])),))


def test_partition_is_total_and_consistent():
    graphs = [graph("b/x"), graph("top"), graph("A/y"), graph("b/z")]
    values = [Value(name="b/serial", value="1"), Value(name="version", value="2")]
    logs = [Log(name="A/events"), Log(name="c/errors")]

    folders = build_groups(graphs, values, logs)

    members = [m for f in folders for m in (*f.graphs, *f.values, *f.logs)]
    assert len(members) == len(graphs) + len(values) + len(logs)
    assert {id(m) for m in members} == {id(m) for m in (*graphs, *values, *logs)}
    for f in folders:
        for m in (*f.graphs, *f.values, *f.logs):
            assert m.name_folder == f.name


def test_folders_sorted_case_insensitively():
    folders = build_groups([graph("b/x"), graph("A/y"), graph("c/q"), graph("root")])
    assert [f.name for f in folders] == ["", "A", "b", "c"]


def test_order_independent_of_input_order():
    names = ["b/x", "A/y", "a2/z", "solo"]
    forward = [f.name for f in build_groups([graph(n) for n in names])]
    backward = [f.name for f in build_groups([graph(n) for n in reversed(names)])]
    assert forward == backward == ["", "A", "a2", "b"]


def test_members_keep_input_order():
    folders = build_groups([graph("d/z"), graph("d/a"), graph("d/M")])
    assert [g.name_base for g in folders[0].graphs] == ["z", "a", "M"]


def test_nested_folder_uses_full_prefix():
    folders = build_groups([graph("a/b/c"), graph("a/d")])
    assert [f.name for f in folders] == ["a", "a/b"]


def test_root_folder_and_anchor():
    root, named = build_groups([graph("x"), graph("drive/left")])
    assert root.is_root
    assert not named.is_root
    assert named.anchor == hashlib.sha1(b"drive").hexdigest()
    assert len(named) == 1


def test_empty_input_gives_no_folders():
    assert build_groups([], [], []) == []


def test_folder_defaults():
    f = Folder(name="x")
    assert f.values == [] and f.logs == [] and f.graphs == []


def test_sort_folds_ascii_case_only():
    assert ascii_lower("AbÉ") == "abÉ"
    # "É" (U+00C9) sorts before "à" (U+00E0) because only A-Z are folded
    folders = build_groups([graph("àb/x"), graph("Éa/y"), graph("Z/q"), graph("a/r")])
    assert [f.name for f in folders] == ["a", "Z", "Éa", "àb"]
