from django.apps import AppConfig


class RemindersConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "hr_core.reminders"

    def ready(self) -> None:
        # registers the prescription.saved handler
        from hr_core.reminders import subscribers  # noqa: F401
