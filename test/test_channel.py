# test/test_channel.py
import numpy as np
import pytest

from badlogvis.core import Attribute, AttributeKind, InvalidChannel, Log, Topic, Value, XAxis, split_name
from badlogvis.core.channel import format_number


def test_split_name():
    assert split_name("a/b/c") == ("a/b", "c")
    assert split_name("c") == ("", "c")
    assert split_name("a/") == ("a", "")


def test_topic_basic_accessors():
    t = Topic(name="drive/left", unit="A", data=[1.0, 2.0, 3.0])

    assert t.name_folder == "drive"
    assert t.name_base == "left"
    assert t.unit == "A"
    assert t.n == 3
    assert isinstance(t.data, np.ndarray)
    assert np.allclose(t.data, [1.0, 2.0, 3.0])


def test_topic_empty_unit_normalized_to_none():
    assert Topic(name="x", unit="").unit is None
    assert Topic(name="x").unit is None


def test_topic_rejects_empty_name():
    with pytest.raises(InvalidChannel):
        Topic(name="")


def test_topic_rejects_non_1d_data():
    with pytest.raises(InvalidChannel):
        Topic(name="x", data=np.zeros((2, 2)))


def test_topic_attribute_helpers():
    t = Topic(
        name="x",
        attrs=(
            Attribute(AttributeKind.AREA),
            Attribute(AttributeKind.JOIN, "a"),
            Attribute(AttributeKind.JOIN, "b"),
        ),
    )
    assert t.has(AttributeKind.AREA)
    assert not t.has(AttributeKind.HIDE)
    assert t.join_targets == ["a", "b"]
    assert not t.hide_only
    assert Topic(name="y", attrs=(Attribute(AttributeKind.HIDE),)).hide_only


def test_with_data_keeps_identity():
    t = Topic(name="a/b", unit="m", attrs=(Attribute(AttributeKind.ZERO),))
    t2 = t.with_data([4.0, 5.0])
    assert t2.name == "a/b"
    assert t2.unit == "m"
    assert t2.attrs == t.attrs
    assert t2.n == 2
    assert t.n == 0


def test_log_rejects_extra_attributes():
    with pytest.raises(InvalidChannel):
        Log(name="events", attrs=(Attribute(AttributeKind.LOG), Attribute(AttributeKind.HIDE)))
    with pytest.raises(InvalidChannel):
        Log(name="events", attrs=())


def test_log_lines_are_lazy():
    log = Log(name="sys/events", entries=((1, "boot"),))
    assert log.lines is None
    assert log.name_folder == "sys"
    assert log.name_base == "events"


def test_log_apply_synthetic_xaxis():
    log = Log(name="events", entries=((0, "boot"), (2, ""), (3, "armed")))
    out = log.apply_xaxis(XAxis())

    assert out.lines == ("[0] boot", "[3] armed")
    assert log.lines is None


def test_log_apply_explicit_xaxis():
    xaxis = XAxis(name="time (s)", unit="s", data=np.array([0.0, 0.5, 1.0, 1.5]))
    log = Log(name="events", entries=((1, "boot"), (3, "armed")))
    assert log.apply_xaxis(xaxis).lines == ("[0.5 s] boot", "[1.5 s] armed")


def test_log_apply_explicit_unitless_xaxis():
    xaxis = XAxis(name="tick", unit=None, data=np.array([10.0, 20.0]))
    log = Log(name="events", entries=((1, "go"),))
    assert log.apply_xaxis(xaxis).lines == ("[20] go",)


def test_format_number():
    assert format_number(1.0) == "1"
    assert format_number(0.25) == "0.25"
    assert format_number(-3.5) == "-3.5"


def test_value_name_split():
    v = Value(name="robot/serial", value="42")
    assert v.name_folder == "robot"
    assert v.name_base == "serial"
