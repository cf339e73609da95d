"""
Management command to email the reminders due today.

Usage:
    python manage.py send_reminders
    python manage.py send_reminders --date 2024-05-13
"""

from datetime import date

from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone

from apps.reminders.services import get_due_reminders, send_due_reminders


class Command(BaseCommand):
    help = 'Email every active reminder scheduled for the given day (default: today)'

    def add_arguments(self, parser):
        parser.add_argument(
            '--date',
            help='Day to send reminders for, as YYYY-MM-DD',
        )
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='List the due reminders without sending anything',
        )

    def handle(self, *args, **options):
        if options['date']:
            try:
                on_date = date.fromisoformat(options['date'])
            except ValueError:
                raise CommandError(f"Invalid date '{options['date']}', expected YYYY-MM-DD")
        else:
            on_date = timezone.localdate()

        if options['dry_run']:
            due = get_due_reminders(on_date=on_date)
            self.stdout.write(f'{due.count()} reminder(s) due on {on_date.isoformat()}:')
            for reminder in due:
                self.stdout.write(f'  - {reminder.user.email} | {reminder.type}')
            self.stdout.write(self.style.WARNING('--dry-run mode: No emails sent.'))
            return

        sent = send_due_reminders(on_date=on_date)
        self.stdout.write(
            self.style.SUCCESS(f'Sent {sent} reminder(s) for {on_date.isoformat()}')
        )
