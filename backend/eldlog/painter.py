import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .geometry import Geometry
from .segments import DAY_MIN, LANES, DutyStatus, Segment, min_to_hhmm, normalize_segments
from .surface import SvgSurface, acquire_surface

logger = logging.getLogger(__name__)

LANE_NAMES = {
    DutyStatus.OFF: "OFF",
    DutyStatus.SLEEPER: "SLEEPER",
    DutyStatus.DRIVING: "DRIVING",
    DutyStatus.ON_DUTY: "ON DUTY",
}

GRID = "#e5e7eb"
AXIS_TEXT = "#334155"
TRACE = "#111827"
LABEL_TEXT = "#1f2937"
TRACE_W = 3
LABEL_RISE = 8


@dataclass(frozen=True)
class Stroke:
    kind: str  # trace | bridge | connector | completion
    x0: float
    y0: float
    x1: float
    y1: float

    @property
    def horizontal(self) -> bool:
        return self.y0 == self.y1

    def as_dict(self) -> dict:
        return {"kind": self.kind, "x0": self.x0, "y0": self.y0, "x1": self.x1, "y1": self.y1}


def _draw_grid(surface: SvgSurface, geo: Geometry):
    lay = geo.layout
    for x in geo.hour_lines():
        surface.line(x, lay.top, x, geo.grid_bottom, stroke=GRID, cls="hour")
    for y in geo.lane_separators():
        surface.line(lay.left, y, geo.end_x, y, stroke=GRID, cls="lane")
    for st in LANES:
        surface.text(6, geo.y_of(st) + 4, LANE_NAMES[st], fill=AXIS_TEXT, cls="lane-name")
    for text, x, anchor in geo.hour_labels():
        surface.text(x, geo.height - 6, text, fill=AXIS_TEXT, anchor=anchor, cls="hour-label")


def paint(segments: Iterable[Segment], geo: Geometry, surface: Optional[SvgSurface]) -> Optional[List[Stroke]]:
    """
    Draw grid and the continuous duty trace for an already normalized sequence.
    Returns the strokes drawn, or None when there was no surface to draw on.
    """
    if surface is None:
        return None

    surface.clear()
    _draw_grid(surface, geo)

    segs = list(segments)
    # nothing logged before the first entry counts as off duty
    if not segs or segs[0].start_min > 0:
        segs.insert(0, Segment("00:00", segs[0].t0 if segs else "24:00", DutyStatus.OFF))

    strokes: List[Stroke] = []

    def stroke(kind, x0, y0, x1, y1):
        strokes.append(Stroke(kind, x0, y0, x1, y1))
        surface.line(x0, y0, x1, y1, stroke=TRACE, width=TRACE_W, cls=kind)

    pen: Optional[Tuple[float, float]] = None
    for seg in segs:
        x0 = geo.x_of(seg.start_min)
        x1 = geo.x_of(seg.end_min)
        y = geo.y_of(seg.status)

        if pen is not None and x0 < pen[0]:
            pen = None
        if pen is not None and pen[0] != x0:
            stroke("bridge", pen[0], pen[1], x0, pen[1])
        if pen is not None and pen[1] != y:
            stroke("connector", x0, pen[1], x0, y)
        stroke("trace", x0, y, x1, y)

        if seg.label:
            surface.text(max(x0 + 4, geo.layout.left), y - LABEL_RISE, seg.label, fill=LABEL_TEXT, cls="label")
        pen = (x1, y)

    # day always ends in the off lane
    off_y = geo.y_of(DutyStatus.OFF)
    if pen is None:
        stroke("completion", geo.x_of(0), off_y, geo.end_x, off_y)
    else:
        if pen[1] != off_y:
            stroke("connector", pen[0], pen[1], pen[0], off_y)
        if pen[0] < geo.end_x:
            stroke("completion", pen[0], off_y, geo.end_x, off_y)

    logger.debug("Painted %d segments as %d strokes on %sx%s", len(segs), len(strokes), geo.width, geo.height)
    return strokes


@dataclass
class Rendering:
    normalized: List[Segment]
    strokes: List[Stroke]
    surface: SvgSurface

    @property
    def svg(self) -> str:
        return self.surface.to_svg()


def render_segments(segments: Iterable[Segment], width, height, density=1.0) -> Optional[Rendering]:
    """Normalize, map and paint one day onto a fresh surface of the given CSS size."""
    surface = acquire_surface(width, height, density)
    if surface is None:
        return None
    normalized = normalize_segments(segments)
    strokes = paint(normalized, Geometry(width, height), surface)
    return Rendering(normalized, strokes, surface)


def covered_minutes(strokes: List[Stroke], geo: Geometry) -> List[Tuple[str, str]]:
    """Horizontal coverage of the trace as merged HH:MM ranges."""
    spans = sorted(
        (min(s.x0, s.x1), max(s.x0, s.x1)) for s in strokes if s.horizontal and s.x0 != s.x1
    )
    merged: List[List[float]] = []
    for a, b in spans:
        if merged and a <= merged[-1][1] + 1e-6:
            merged[-1][1] = max(merged[-1][1], b)
        else:
            merged.append([a, b])

    def to_min(x):
        return round((x - geo.layout.left) / geo.inner_w * DAY_MIN)

    return [(min_to_hhmm(to_min(a)), min_to_hhmm(to_min(b))) for a, b in merged]
