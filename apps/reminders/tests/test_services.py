"""Tests for reminder delivery and the send_reminders command."""

import pytest
from datetime import date
from io import StringIO
from unittest.mock import patch

from django.core import mail
from django.core.management import call_command
from django.core.management.base import CommandError

from apps.common.exceptions import EmailDeliveryError
from apps.reminders.services import get_due_reminders, send_due_reminders

# 2024-05-13 is a Monday, 2024-05-17 a Friday
MONDAY = date(2024, 5, 13)
FRIDAY = date(2024, 5, 17)


@pytest.mark.django_db
class TestReminderDelivery:

    def test_due_reminders_match_weekday(self, monday_reminder, paused_reminder, friday_reminder):
        assert list(get_due_reminders(on_date=MONDAY)) == [monday_reminder]
        assert list(get_due_reminders(on_date=FRIDAY)) == [friday_reminder]

    def test_send_due_reminders(self, monday_reminder, paused_reminder, friday_reminder):
        sent = send_due_reminders(on_date=MONDAY)

        assert sent == 1
        assert len(mail.outbox) == 1
        assert mail.outbox[0].to == ['planner@example.com']
        assert mail.outbox[0].subject == 'Reminder: record your expenses'
        assert 'Monday' in mail.outbox[0].body

    def test_send_due_reminders_skips_inactive_users(self, monday_reminder, reminder_owner):
        reminder_owner.is_active = False
        reminder_owner.save()

        assert send_due_reminders(on_date=MONDAY) == 0
        assert mail.outbox == []

    def test_failed_delivery_is_skipped(self, monday_reminder):
        with patch(
            'apps.reminders.services.reminder_delivery.send_email',
            side_effect=EmailDeliveryError('smtp down'),
        ):
            assert send_due_reminders(on_date=MONDAY) == 0


@pytest.mark.django_db
class TestSendRemindersCommand:

    def test_command_sends_for_given_date(self, friday_reminder):
        out = StringIO()
        call_command('send_reminders', '--date', '2024-05-17', stdout=out)

        assert 'Sent 1 reminder(s) for 2024-05-17' in out.getvalue()
        assert mail.outbox[0].to == ['other@example.com']

    def test_command_dry_run(self, monday_reminder):
        out = StringIO()
        call_command('send_reminders', '--date', '2024-05-13', '--dry-run', stdout=out)

        assert '1 reminder(s) due on 2024-05-13' in out.getvalue()
        assert mail.outbox == []

    def test_command_rejects_bad_date(self):
        with pytest.raises(CommandError):
            call_command('send_reminders', '--date', '13/05/2024')
