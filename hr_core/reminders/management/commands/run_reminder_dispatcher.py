# hr_core/reminders/management/commands/run_reminder_dispatcher.py
from __future__ import annotations

from django.conf import settings
from django.core.management.base import BaseCommand

from hr_core.reminders.dispatcher import ReminderDispatcher
from hr_core.reminders.scheduler import ReminderScheduler


class Command(BaseCommand):
    help = "Send due medicine reminders every minute (or once with --once)."

    def add_arguments(self, parser):
        parser.add_argument(
            "--once",
            action="store_true",
            help="Run a single dispatch tick for the current minute and exit.",
        )
        parser.add_argument(
            "--interval",
            type=int,
            default=None,
            help="Seconds between ticks (defaults to REMINDER_TICK_SECONDS).",
        )

    def handle(self, *args, **options):
        dispatcher = ReminderDispatcher()

        if options["once"]:
            report = dispatcher.tick()
            self.stdout.write(
                self.style.SUCCESS(
                    f"{report.today} {report.current_time}: matched={report.matched} "
                    f"sent={report.sent} skipped={report.skipped} failed={report.failed}"
                )
            )
            return

        interval = options["interval"] or settings.REMINDER_TICK_SECONDS
        scheduler = ReminderScheduler(dispatcher, interval_seconds=interval)
        self.stdout.write(f"Medicine reminder scheduler started (every {interval}s). Ctrl+C to stop.")
        try:
            scheduler.run_forever()
        except KeyboardInterrupt:
            scheduler.stop()
            self.stdout.write("Medicine reminder scheduler stopped.")
