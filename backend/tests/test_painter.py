import pytest

from eldlog.geometry import Geometry
from eldlog.painter import covered_minutes, paint, render_segments
from eldlog.segments import LANES, DutyStatus, Segment, normalize_segments
from eldlog.surface import SvgSurface

W, H = 960, 180


def _geo():
    return Geometry(W, H)


def _lane(geo, y):
    for st in LANES:
        if geo.y_of(st) == pytest.approx(y):
            return st
    raise AssertionError(f"y={y} is not a lane center")


def _paint(segments):
    geo = _geo()
    surface = SvgSurface(W, H)
    strokes = paint(normalize_segments(segments), geo, surface)
    return geo, surface, strokes


def _runs(geo, strokes):
    """Horizontal runs as (from, to, lane) in HH:MM terms."""
    out = []
    for s in strokes:
        if s.horizontal and s.x0 != s.x1:
            (a, b), = covered_minutes([s], geo)
            out.append((a, b, _lane(geo, s.y0)))
    return out


def test_workday_trace(workday):
    geo, _, strokes = _paint(workday.segments)
    assert [s.kind for s in strokes] == [
        "trace", "connector", "trace", "connector", "trace", "connector", "completion",
    ]
    assert _runs(geo, strokes) == [
        ("00:00", "06:00", DutyStatus.OFF),
        ("06:00", "08:00", DutyStatus.ON_DUTY),
        ("08:00", "16:00", DutyStatus.DRIVING),
        ("16:00", "24:00", DutyStatus.OFF),
    ]
    drop = strokes[-2]
    assert drop.x0 == drop.x1 == pytest.approx(geo.x_of(16 * 60))
    assert _lane(geo, drop.y0) is DutyStatus.DRIVING
    assert _lane(geo, drop.y1) is DutyStatus.OFF


def test_empty_day_is_one_full_width_off_trace():
    geo, _, strokes = _paint([])
    assert len(strokes) == 1
    only = strokes[0]
    assert (only.x0, only.x1) == (pytest.approx(geo.x_of(0)), pytest.approx(geo.end_x))
    assert _lane(geo, only.y0) is DutyStatus.OFF


def test_gap_between_segments_stays_in_previous_lane():
    geo, _, strokes = _paint([
        Segment("00:00", "08:00", "off"),
        Segment("08:00", "10:00", "on_duty"),
        Segment("12:00", "14:00", "driving"),
    ])
    bridge = next(s for s in strokes if s.kind == "bridge")
    assert _lane(geo, bridge.y0) is DutyStatus.ON_DUTY
    assert covered_minutes([bridge], geo) == [("10:00", "12:00")]
    connector = strokes[strokes.index(bridge) + 1]
    assert connector.kind == "connector"
    assert connector.x0 == pytest.approx(geo.x_of(12 * 60))


def test_midnight_crossing_segment():
    geo, _, strokes = _paint([Segment("23:30", "01:00", "sleeper")])
    assert _runs(geo, strokes) == [
        ("00:00", "01:00", DutyStatus.SLEEPER),
        ("01:00", "23:30", DutyStatus.SLEEPER),
        ("23:30", "24:00", DutyStatus.SLEEPER),
    ]
    assert [s.kind for s in strokes] == ["trace", "bridge", "trace", "connector"]
    # day still closes in the off lane
    last = strokes[-1]
    assert last.kind == "connector"
    assert last.x0 == pytest.approx(geo.end_x)
    assert _lane(geo, last.y1) is DutyStatus.OFF


def test_day_already_ending_off_gets_no_completion():
    geo, _, strokes = _paint([
        Segment("06:00", "08:00", "driving"),
        Segment("08:00", "24:00", "off"),
    ])
    assert [s.kind for s in strokes] == ["trace", "connector", "trace", "connector", "trace"]
    last = strokes[-1]
    assert last.x1 == pytest.approx(geo.end_x)
    assert _lane(geo, last.y1) is DutyStatus.OFF


def test_backward_jump_resets_pen():
    geo, _, strokes = _paint([
        Segment("06:00", "10:00", "driving"),
        Segment("08:00", "09:00", "on_duty"),
    ])
    # no stroke ever runs from 10:00 back to 08:00
    assert not any(s.kind == "bridge" for s in strokes)
    on_duty = [s for s in strokes if s.kind == "trace" and _lane(geo, s.y0) is DutyStatus.ON_DUTY]
    assert covered_minutes(on_duty, geo) == [("08:00", "09:00")]
    assert [s.kind for s in strokes[-2:]] == ["connector", "completion"]


@pytest.mark.parametrize("segments", [
    [],
    [Segment("06:00", "08:00", "on_duty"), Segment("08:00", "16:00", "driving")],
    [Segment("22:00", "02:00", "driving", "Night run"), Segment("05:00", "07:00", "on_duty")],
    [Segment("00:00", "24:00", "sleeper")],
    [Segment("03:00", "04:00", "driving"), Segment("13:00", "13:30", "on_duty")],
    [Segment("06:00", "10:00", "driving"), Segment("08:00", "09:00", "on_duty")],
])
def test_trace_covers_whole_day_and_ends_off(segments):
    geo, _, strokes = _paint(segments)
    assert covered_minutes(strokes, geo) == [("00:00", "24:00")]
    last = strokes[-1]
    assert _lane(geo, last.y1) is DutyStatus.OFF


def test_full_day_in_another_lane_still_drops_to_off():
    geo, _, strokes = _paint([Segment("00:00", "24:00", "sleeper")])
    assert [s.kind for s in strokes] == ["trace", "connector"]
    assert strokes[-1].x0 == pytest.approx(geo.end_x)


def test_labels_are_drawn_and_escaped():
    _, surface, _ = _paint([Segment("06:00", "08:00", "on_duty", "Fuel & <go>")])
    svg = surface.to_svg()
    assert "Fuel &amp; &lt;go&gt;" in svg
    assert 'class="label"' in svg


def test_label_never_left_of_gutter():
    geo, surface, _ = _paint([Segment("00:00", "01:00", "driving", "Start")])
    label = next(p for p in surface.parts if 'class="label"' in p)
    x = float(label.split('x="')[1].split('"')[0])
    assert x >= geo.layout.left


def test_grid_is_drawn():
    _, surface, _ = _paint([])
    svg = surface.to_svg()
    assert svg.count('class="hour"') == 25
    assert svg.count('class="lane"') == 5
    for name in ("OFF", "SLEEPER", "DRIVING", "ON DUTY"):
        assert f">{name}</text>" in svg
    assert svg.count('class="hour-label"') == 13


def test_repaint_is_idempotent(workday):
    geo = _geo()
    surface = SvgSurface(W, H)
    first = paint(normalize_segments(workday.segments), geo, surface)
    svg = surface.to_svg()
    second = paint(normalize_segments(workday.segments), geo, surface)
    assert first == second
    assert surface.to_svg() == svg


def test_paint_without_surface_is_a_noop(workday):
    assert paint(normalize_segments(workday.segments), _geo(), None) is None
    assert render_segments(workday.segments, 0, H) is None
    assert render_segments(workday.segments, W, None) is None


def test_render_segments_does_not_touch_input(workday):
    before = list(workday.segments)
    rendering = render_segments(workday.segments, W, H)
    assert workday.segments == before
    assert [s.t0 for s in rendering.normalized] == ["06:00", "08:00"]
    assert rendering.svg.startswith("<svg")
