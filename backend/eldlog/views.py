import json
import logging

from django.http import HttpResponse
from django.template.loader import render_to_string
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.decorators import api_view, parser_classes
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.response import Response

from .geometry import Geometry
from .painter import covered_minutes
from .serializers import DayPlanSerializer, LogbookPageInput, RenderLogbookInput
from .viewer import LogbookPage, modal_size, render_day, thumbnail_size

logger = logging.getLogger(__name__)


def _render(data):
    day = DayPlanSerializer.to_day_plan(data["day"])
    if data["surface"] == "modal":
        size = modal_size(data["density"])
    else:
        size = thumbnail_size(data.get("container_width"), data["density"])
    return size, render_day(day, size)


@extend_schema(request=RenderLogbookInput, responses={(200, "image/svg+xml"): OpenApiTypes.STR})
@api_view(["POST"])
def render_logbook(request):
    ser = RenderLogbookInput(data=request.data)
    ser.is_valid(raise_exception=True)
    size, rendering = _render(ser.validated_data)
    if rendering is None:
        return Response({"detail": "Nothing to draw for that surface size."}, status=status.HTTP_400_BAD_REQUEST)
    return HttpResponse(rendering.svg, content_type="image/svg+xml")


@extend_schema(request=RenderLogbookInput, responses={200: OpenApiTypes.OBJECT})
@api_view(["POST"])
def logbook_trace(request):
    ser = RenderLogbookInput(data=request.data)
    ser.is_valid(raise_exception=True)
    size, rendering = _render(ser.validated_data)
    if rendering is None:
        return Response({"detail": "Nothing to draw for that surface size."}, status=status.HTTP_400_BAD_REQUEST)
    surface = rendering.surface
    return Response({
        "normalized": [s.as_dict() for s in rendering.normalized],
        "strokes": [s.as_dict() for s in rendering.strokes],
        "coverage": covered_minutes(rendering.strokes, Geometry(size.width, size.height)),
        "surface": {
            "width": surface.css_width,
            "height": surface.css_height,
            "density": surface.density,
            "backing_width": surface.backing_width,
            "backing_height": surface.backing_height,
        },
    })


@extend_schema(request=LogbookPageInput, responses={(200, "text/html"): OpenApiTypes.STR})
@api_view(["POST"])
@parser_classes([JSONParser, FormParser, MultiPartParser])
def logbook_page(request):
    ser = LogbookPageInput(data=request.data)
    ser.is_valid(raise_exception=True)
    data = ser.validated_data

    page = LogbookPage(
        [DayPlanSerializer.to_day_plan(d) for d in data["days"]],
        density=data["density"],
    )
    page.observe(data.get("container_width"))
    page.flush(force=True)
    if data.get("open") is not None and not page.open(data["open"]):
        logger.info("No day %s to enlarge", data["open"])
    if data.get("key"):
        page.on_key(data["key"])

    html = render_to_string("eldlog/page.html", {
        "page": page,
        "open_card": page.open_card,
        "days_json": json.dumps(data["days"]),
        "container_width": data.get("container_width") or "",
        "density": data["density"],
    })
    return HttpResponse(html, content_type="text/html; charset=utf-8")
