import math

import pytest

from geomkit.hyper_line import dist
from geomkit.hyper_point import Point
from geomkit.hyper_transform import Transformation
from geomkit.jsonio import ParseError


def _busy():
    t = Transformation()
    t.scroll(30, -20)
    t.zoom(150, 0.0, 0.0)
    return t


def test_default_json():
    assert Transformation().to_json() == {"Re_z0": 0.0, "Im_z0": 0.0, "phi": 0.0}


def test_zoom_rotates():
    t = Transformation()
    t.zoom(50, 1.0, 2.0)
    assert t.to_json()["phi"] == pytest.approx(50 * 3e-3)


def test_scroll_shifts_z0():
    t = Transformation()
    t.scroll(2, -4)
    data = t.to_json()
    assert data["Re_z0"] == pytest.approx(2 * 5e-3)
    assert data["Im_z0"] == pytest.approx(-4 * 5e-3)


def test_identity_transform():
    p = Point(0.4, -0.3)
    q = Transformation().transform(p)
    assert (q.x, q.y) == pytest.approx((0.4, -0.3), abs=1e-12)


def test_quarter_turn():
    t = Transformation()
    t.zoom((math.pi / 2) / 3e-3, 0.0, 0.0)
    q = t.transform(Point(0.5, 0.0))
    assert q.x == pytest.approx(0.0, abs=1e-9)
    assert q.y == pytest.approx(0.5, abs=1e-9)


@pytest.mark.parametrize("p", [Point(0.0, 0.0), Point(0.4, -0.3), Point(-0.7, 0.2)])
def test_transform_untransform_round_trip(p):
    t = _busy()
    q = t.untransform(t.transform(p))
    assert (q.x, q.y) == pytest.approx((p.x, p.y), abs=1e-9)


def test_transform_is_isometry():
    t = _busy()
    a, b = Point(0.1, 0.2), Point(-0.4, 0.3)
    assert dist(t.transform(a), t.transform(b)) == pytest.approx(dist(a, b), abs=1e-8)


def test_move_puts_source_where_target_was():
    t = _busy()
    source, target = Point(0.2, 0.1), Point(-0.3, 0.4)
    before = t.transform(target)
    t.move(source, target)
    after = t.transform(source)
    assert (after.x, after.y) == pytest.approx((before.x, before.y), abs=1e-8)


def test_clear_resets():
    t = _busy()
    t.clear()
    assert t.to_json() == {"Re_z0": 0.0, "Im_z0": 0.0, "phi": 0.0}


def test_json_round_trip():
    t = _busy()
    other = Transformation()
    other.from_json(t.to_json())
    p = Point(0.3, 0.3)
    q1, q2 = t.transform(p), other.transform(p)
    assert (q1.x, q1.y) == pytest.approx((q2.x, q2.y), abs=1e-12)


def test_from_json_missing_key():
    t = Transformation()
    with pytest.raises(ParseError):
        t.from_json({"Re_z0": 0.1, "Im_z0": 0.2})
    assert t.to_json()["Re_z0"] == 0.0


def test_from_json_bad_value():
    with pytest.raises(ParseError):
        Transformation().from_json({"Re_z0": "a", "Im_z0": 0.0, "phi": 0.0})