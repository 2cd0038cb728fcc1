import json

from rest_framework import serializers

from .segments import DayPlan, DutyStatus, Segment, SegmentTimeError, hhmm_to_min


def _hhmm(value):
    try:
        hhmm_to_min(value)
    except SegmentTimeError as e:
        raise serializers.ValidationError(str(e))
    return value


class SegmentSerializer(serializers.Serializer):
    t0 = serializers.CharField(trim_whitespace=False, validators=[_hhmm])
    t1 = serializers.CharField(trim_whitespace=False, validators=[_hhmm])
    status = serializers.ChoiceField(choices=[s.value for s in DutyStatus])
    label = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False, default="")


class DayPlanSerializer(serializers.Serializer):
    index = serializers.IntegerField(min_value=1)
    date = serializers.CharField()
    segments = SegmentSerializer(many=True, allow_empty=True)
    notes = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False, default="")

    @staticmethod
    def to_day_plan(data) -> DayPlan:
        return DayPlan(
            index=data["index"],
            date=data["date"],
            segments=[Segment(**s) for s in data["segments"]],
            notes=data.get("notes", ""),
        )


class SurfaceOptions(serializers.Serializer):
    container_width = serializers.IntegerField(required=False, min_value=1)
    density = serializers.FloatField(required=False, default=1.0, min_value=0.1)


class RenderLogbookInput(SurfaceOptions):
    day = DayPlanSerializer()
    surface = serializers.ChoiceField(choices=["thumbnail", "modal"], default="thumbnail")


class LogbookPageInput(SurfaceOptions):
    days = DayPlanSerializer(many=True)
    open = serializers.IntegerField(required=False, min_value=1)
    key = serializers.CharField(required=False, allow_blank=True)

    def to_internal_value(self, data):
        # form posts carry the plan as a JSON string
        days = data.get("days")
        if isinstance(days, str):
            try:
                days = json.loads(days)
            except ValueError:
                raise serializers.ValidationError({"days": ["Expected a JSON list of day plans."]})
            data = {k: data.get(k) for k in data.keys() if data.get(k) not in ("", None)}
            data["days"] = days
        return super().to_internal_value(data)
