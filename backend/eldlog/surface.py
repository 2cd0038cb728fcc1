import logging
from typing import List, Optional

from .conf import eldlog_setting

logger = logging.getLogger(__name__)


def _escape(s: str) -> str:
    return (s or "").replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _num(v: float) -> str:
    return f"{v:.2f}".rstrip("0").rstrip(".")


def clamp_density(density) -> float:
    try:
        d = float(density)
    except (TypeError, ValueError):
        return 1.0
    if d <= 0:
        return 1.0
    return min(float(eldlog_setting("MAX_DENSITY")), d)


class SvgSurface:
    """
    An SVG drawing surface. Callers draw in CSS units; the document's
    backing size is css size * density and one scale transform maps
    between the two.
    """

    def __init__(self, css_width: float, css_height: float, density: float = 1.0):
        self.css_width = css_width
        self.css_height = css_height
        self.density = clamp_density(density)
        self.backing_width = round(css_width * self.density)
        self.backing_height = round(css_height * self.density)
        self.parts: List[str] = []

    def clear(self):
        self.parts = []
        self.parts.append(
            f'<rect x="0" y="0" width="{_num(self.css_width)}" height="{_num(self.css_height)}" fill="white"/>'
        )

    def line(self, x1, y1, x2, y2, stroke="#e5e7eb", width=1, cls=None):
        attrs = f' class="{cls}"' if cls else ""
        self.parts.append(
            f'<line{attrs} x1="{_num(x1)}" y1="{_num(y1)}" x2="{_num(x2)}" y2="{_num(y2)}" '
            f'stroke="{stroke}" stroke-width="{width}" stroke-linecap="square"/>'
        )

    def text(self, x, y, s, size=12, fill="#334155", anchor="start", cls=None):
        attrs = f' class="{cls}"' if cls else ""
        self.parts.append(
            f'<text{attrs} x="{_num(x)}" y="{_num(y)}" font-size="{size}" font-family="system-ui, sans-serif" '
            f'fill="{fill}" text-anchor="{anchor}">{_escape(s)}</text>'
        )

    def to_svg(self) -> str:
        head = (
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{self.backing_width}" height="{self.backing_height}" '
            f'viewBox="0 0 {self.backing_width} {self.backing_height}" '
            f'style="width:{_num(self.css_width)}px;height:{_num(self.css_height)}px">'
        )
        return "".join([head, f'<g transform="scale({_num(self.density)})">', *self.parts, "</g></svg>"])


def acquire_surface(css_width, css_height, density=1.0) -> Optional[SvgSurface]:
    """Return a surface, or None when there is nothing to draw onto yet."""
    if not css_width or not css_height or css_width <= 0 or css_height <= 0:
        logger.debug("No surface for size %sx%s", css_width, css_height)
        return None
    return SvgSurface(css_width, css_height, density)
