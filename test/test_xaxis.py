# test/test_xaxis.py
import numpy as np
import pytest

from badlogvis.core import AmbiguousXAxis, Attribute, AttributeKind, Topic, select_xaxis

XAXIS = (Attribute(AttributeKind.XAXIS),)


def test_no_xaxis_topic_gives_synthetic_index():
    xaxis = select_xaxis([Topic(name="a", data=[1.0, 2.0])])
    assert xaxis.name == "Index"
    assert xaxis.unit is None
    assert xaxis.data is None
    assert xaxis.synthetic


def test_single_xaxis_topic():
    topics = [
        Topic(name="v", unit="m/s", data=[1.0, 2.0]),
        Topic(name="sys/time", unit="s", attrs=XAXIS, data=[0.0, 0.02]),
    ]
    xaxis = select_xaxis(topics)

    assert xaxis.name == "time (s)"
    assert xaxis.unit == "s"
    assert np.allclose(xaxis.data, [0.0, 0.02])
    assert len(topics) == 2


def test_unitless_xaxis_label_has_no_unit():
    xaxis = select_xaxis([Topic(name="tick", attrs=XAXIS, data=[0.0, 1.0])])
    assert xaxis.name == "tick"
    assert xaxis.unit is None


def test_multiple_xaxis_topics_is_fatal():
    topics = [
        Topic(name="a", attrs=XAXIS, data=[0.0]),
        Topic(name="b", attrs=XAXIS, data=[0.0]),
    ]
    with pytest.raises(AmbiguousXAxis, match="Multiple topics with xaxis attribute"):
        select_xaxis(topics)


def test_bind_uses_axis_data():
    xaxis = select_xaxis([Topic(name="t", attrs=XAXIS, data=[10.0, 20.0])])
    s = xaxis.bind(np.array([1.0, 2.0]), name="y")
    assert s.points() == [(10.0, 1.0), (20.0, 2.0)]
    assert s.name == "y"
