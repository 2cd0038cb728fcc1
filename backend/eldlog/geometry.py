from dataclasses import dataclass
from typing import List, Tuple

from .segments import DAY_MIN, LANES, DutyStatus

LANE_INDEX = {st: i for i, st in enumerate(LANES)}


@dataclass(frozen=True)
class Layout:
    top: float = 10
    bottom: float = 22  # hour numbers
    left: float = 72  # lane names
    right: float = 12


DEFAULT_LAYOUT = Layout()


@dataclass(frozen=True)
class Geometry:
    """
    Maps minute-of-day and duty status to CSS-unit coordinates on a
    width x height surface. Build a new one whenever the surface size changes.
    """

    width: float
    height: float
    layout: Layout = DEFAULT_LAYOUT

    @property
    def inner_w(self) -> float:
        return self.width - self.layout.left - self.layout.right

    @property
    def inner_h(self) -> float:
        return self.height - self.layout.top - self.layout.bottom

    @property
    def lane_h(self) -> float:
        return self.inner_h / len(LANES)

    @property
    def grid_bottom(self) -> float:
        return self.layout.top + self.inner_h

    @property
    def end_x(self) -> float:
        return self.x_of(DAY_MIN)

    def x_of(self, minute: float) -> float:
        return self.layout.left + self.inner_w * (minute / float(DAY_MIN))

    def y_of(self, status: DutyStatus) -> float:
        return self.layout.top + self.lane_h * (LANE_INDEX[DutyStatus(status)] + 0.5)

    def hour_lines(self) -> List[float]:
        return [self.x_of(h * 60) for h in range(25)]

    def lane_separators(self) -> List[float]:
        return [self.layout.top + self.lane_h * i for i in range(len(LANES) + 1)]

    def hour_labels(self) -> List[Tuple[str, float, str]]:
        """(text, x, text-anchor) every 2 hours; 24 is right-aligned so it stays on the canvas."""
        out = []
        for h in range(0, 25, 2):
            x = self.x_of(h * 60)
            if h == 24:
                out.append((f"{h:02d}", x, "end"))
            else:
                out.append((f"{h:02d}", x + 2, "start"))
        return out
