"""
Thumbnail and enlarged views of one day's log.

The thumbnail follows its container: resize notifications are collected by
``observe()`` and turned into a repaint by ``flush()`` once the debounce
window has passed. The enlarged view is a two-state machine (closed/open)
that suspends page scrolling while open.
"""
import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from .conf import eldlog_setting
from .painter import Rendering, render_segments
from .segments import DayPlan
from .surface import clamp_density

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SurfaceSize:
    width: int
    height: int
    density: float = 1.0


def default_thumbnail_size(density=1.0) -> SurfaceSize:
    w, h = eldlog_setting("THUMBNAIL_DEFAULT_SIZE")
    return SurfaceSize(w, h, clamp_density(density))


def thumbnail_size(container_width, density=1.0) -> SurfaceSize:
    try:
        container_width = float(container_width)
    except (TypeError, ValueError):
        container_width = 0
    if container_width <= 0:
        logger.warning("Container width unavailable, using default thumbnail size")
        return default_thumbnail_size(density)

    width = max(container_width, eldlog_setting("THUMBNAIL_MIN_WIDTH"))
    height = width * eldlog_setting("THUMBNAIL_ASPECT")
    height = max(eldlog_setting("THUMBNAIL_MIN_HEIGHT"), min(eldlog_setting("THUMBNAIL_MAX_HEIGHT"), height))
    return SurfaceSize(int(width), int(round(height)), clamp_density(density))


def modal_size(density=1.0) -> SurfaceSize:
    w, h = eldlog_setting("MODAL_SIZE")
    return SurfaceSize(w, h, clamp_density(density))


def render_day(day: DayPlan, size: SurfaceSize) -> Optional[Rendering]:
    return render_segments(day.segments, size.width, size.height, size.density)


class ThumbnailView:
    def __init__(self, day: DayPlan, density=1.0, debounce=None, clock: Callable[[], float] = time.monotonic):
        self.day = day
        self.density = density
        self.debounce = eldlog_setting("RESIZE_DEBOUNCE") if debounce is None else debounce
        self.clock = clock
        self.size: Optional[SurfaceSize] = None
        self.rendering: Optional[Rendering] = None
        self.paint_count = 0
        self._pending = None
        self._last_notice = None

    def observe(self, container_width):
        """Record a container resize; the repaint happens on flush()."""
        self._pending = container_width
        self._last_notice = self.clock()

    def flush(self, force=False) -> bool:
        if self._last_notice is None:
            return False
        if not force and self.clock() - self._last_notice < self.debounce:
            return False
        size = thumbnail_size(self._pending, self.density)
        self._pending = None
        self._last_notice = None
        if size == self.size and self.rendering is not None:
            return False
        self.size = size
        self.repaint()
        return True

    def repaint(self):
        if self.size is None:
            self.size = default_thumbnail_size(self.density)
        self.rendering = render_day(self.day, self.size)
        self.paint_count += 1

    @property
    def svg(self) -> str:
        if self.rendering is None:
            self.repaint()
        return self.rendering.svg if self.rendering else ""


class PageScroll:
    def __init__(self):
        self.suspended = False

    def suspend(self):
        self.suspended = True

    def restore(self):
        self.suspended = False


class ViewState(str, Enum):
    CLOSED = "closed"
    OPEN = "open"


class EnlargedView:
    def __init__(self, day: DayPlan, page: PageScroll, density=1.0):
        self.day = day
        self.page = page
        self.density = density
        self.state = ViewState.CLOSED
        self.rendering: Optional[Rendering] = None

    @property
    def is_open(self) -> bool:
        return self.state is ViewState.OPEN

    def activate(self):
        if self.is_open:
            return
        # paint before presenting
        self.rendering = render_day(self.day, modal_size(self.density))
        self.page.suspend()
        self.state = ViewState.OPEN
        logger.info("Opened enlarged log for day %s", self.day.index)

    def close(self):
        if not self.is_open:
            return
        self.rendering = None
        self.page.restore()
        self.state = ViewState.CLOSED
        logger.info("Closed enlarged log for day %s", self.day.index)

    def on_key(self, key: str):
        if key == "Escape":
            self.close()

    @property
    def svg(self) -> str:
        return self.rendering.svg if self.rendering else ""


class DayLogCard:
    def __init__(self, day: DayPlan, page: PageScroll, density=1.0, **thumbnail_opts):
        self.day = day
        self.thumbnail = ThumbnailView(day, density=density, **thumbnail_opts)
        self.modal = EnlargedView(day, page, density=density)

    @property
    def title(self) -> str:
        return f"ELD Log — Day {self.day.index}"

    @property
    def date(self) -> str:
        return self.day.date

    @property
    def notes(self) -> str:
        return self.day.notes


class LogbookPage:
    """All day cards of one trip plan, sharing a single page scroll."""

    def __init__(self, days: List[DayPlan], density=1.0, **thumbnail_opts):
        self.scroll = PageScroll()
        self.cards = [DayLogCard(d, self.scroll, density=density, **thumbnail_opts) for d in days]

    def card(self, index: int) -> Optional[DayLogCard]:
        for c in self.cards:
            if c.day.index == index:
                return c
        return None

    @property
    def open_card(self) -> Optional[DayLogCard]:
        for c in self.cards:
            if c.modal.is_open:
                return c
        return None

    def observe(self, container_width):
        for c in self.cards:
            c.thumbnail.observe(container_width)

    def flush(self, force=False):
        for c in self.cards:
            c.thumbnail.flush(force=force)

    def open(self, index: int) -> bool:
        card = self.card(index)
        if card is None:
            return False
        current = self.open_card
        if current is not None and current is not card:
            current.modal.close()
        card.modal.activate()
        return True

    def on_key(self, key: str):
        current = self.open_card
        if current is not None:
            current.modal.on_key(key)
