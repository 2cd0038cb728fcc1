import pytest

from eldlog.geometry import DEFAULT_LAYOUT, Geometry, Layout
from eldlog.segments import LANES, DutyStatus


@pytest.mark.parametrize("width", [480, 960, 1440])
def test_x_is_linear_across_the_day(width):
    geo = Geometry(width, 180)
    assert geo.x_of(0) == pytest.approx(DEFAULT_LAYOUT.left)
    assert geo.x_of(1440) == pytest.approx(width - DEFAULT_LAYOUT.right)
    assert geo.x_of(720) == pytest.approx((geo.x_of(0) + geo.x_of(1440)) / 2)
    xs = [geo.x_of(m) for m in range(0, 1441, 15)]
    assert xs == sorted(xs)


def test_lane_centers_follow_lane_order():
    geo = Geometry(960, 180, Layout(top=10, bottom=10, left=50, right=10))
    assert geo.lane_h == 40
    assert [geo.y_of(st) for st in LANES] == [30, 70, 110, 150]
    assert geo.y_of("driving") == geo.y_of(DutyStatus.DRIVING)


def test_grid_positions():
    geo = Geometry(960, 180)
    assert len(geo.hour_lines()) == 25
    assert geo.hour_lines()[-1] == pytest.approx(geo.end_x)
    seps = geo.lane_separators()
    assert len(seps) == 5
    assert seps[0] == DEFAULT_LAYOUT.top
    assert seps[-1] == pytest.approx(geo.grid_bottom)


def test_hour_labels_every_two_hours():
    labels = Geometry(960, 180).hour_labels()
    assert [t for t, _, _ in labels] == ["00", "02", "04", "06", "08", "10", "12", "14", "16", "18", "20", "22", "24"]
    assert labels[-1][2] == "end"
    assert {a for _, _, a in labels[:-1]} == {"start"}
