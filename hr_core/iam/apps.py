from django.apps import AppConfig


class IamConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "hr_core.iam"

    def ready(self) -> None:
        # registers the drf-spectacular auth extension
        from hr_core.iam import openapi  # noqa: F401
