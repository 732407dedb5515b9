from django.apps import AppConfig


class BinsConfig(AppConfig):
    """Waste bin registry, pickup ledger and statistics."""

    default_auto_field = "django.db.models.AutoField"
    name = "bins"
    verbose_name = "Waste bins"
