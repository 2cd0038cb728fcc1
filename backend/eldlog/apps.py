from django.apps import AppConfig


class EldlogConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "eldlog"
    verbose_name = "ELD log timeline"
