import re
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, List

DAY_MIN = 24 * 60
HHMM_RE = re.compile(r"(\d{1,2}):(\d{2})", re.ASCII)


class DutyStatus(str, Enum):
    OFF = "off"
    SLEEPER = "sleeper"
    DRIVING = "driving"
    ON_DUTY = "on_duty"


LANES = [DutyStatus.OFF, DutyStatus.SLEEPER, DutyStatus.DRIVING, DutyStatus.ON_DUTY]  # top→bottom


class SegmentTimeError(ValueError):
    """A segment endpoint is not a usable HH:MM time of day."""


def hhmm_to_min(hhmm: str) -> int:
    match = HHMM_RE.fullmatch(hhmm) if isinstance(hhmm, str) else None
    if match is None:
        raise SegmentTimeError(f"Expected HH:MM, got {hhmm!r}")
    hh, mm = int(match.group(1)), int(match.group(2))
    minutes = hh * 60 + mm
    if mm >= 60 or minutes > DAY_MIN:
        raise SegmentTimeError(f"{hhmm!r} is outside 00:00..24:00")
    return minutes


def min_to_hhmm(m: int) -> str:
    m = max(0, min(DAY_MIN, m))
    if m == DAY_MIN:
        return "24:00"
    return f"{m//60:02d}:{m%60:02d}"


@dataclass(frozen=True)
class Segment:
    t0: str
    t1: str
    status: DutyStatus
    label: str = ""

    def __post_init__(self):
        # parse eagerly so bad planner data fails at construction, not mid-paint
        object.__setattr__(self, "status", DutyStatus(self.status))
        object.__setattr__(self, "label", self.label or "")
        hhmm_to_min(self.t0)
        hhmm_to_min(self.t1)

    @property
    def start_min(self) -> int:
        return hhmm_to_min(self.t0)

    @property
    def end_min(self) -> int:
        return hhmm_to_min(self.t1)

    @property
    def crosses_midnight(self) -> bool:
        return self.end_min < self.start_min

    def as_dict(self) -> dict:
        return {"t0": self.t0, "t1": self.t1, "status": self.status.value, "label": self.label}


@dataclass(frozen=True)
class DayPlan:
    index: int
    date: str
    segments: List[Segment] = field(default_factory=list)
    notes: str = ""


def normalize_segments(segments: Iterable[Segment]) -> List[Segment]:
    """
    Prepare a day's segments for plotting.
    - Split segments that pass midnight into [t0..24:00] and [00:00..t1];
      the second piece gets a "(cont)" label when the original had one.
    - Sort by start minute (stable, so equal starts keep input order).
    Nothing is dropped, merged or clipped; overlaps are left for the painter.
    """
    out: List[Segment] = []
    for s in segments or []:
        if not s.crosses_midnight:
            out.append(s)
            continue
        out.append(replace(s, t1="24:00"))
        out.append(Segment("00:00", s.t1, s.status, f"{s.label} (cont)" if s.label else ""))
    out.sort(key=lambda s: s.start_min)
    return out
