import pytest
from unittest.mock import patch
from django.core import mail

from apps.common.email import send_email
from apps.common.exceptions import EmailDeliveryError


class TestSendEmail:

    def test_send_email(self, settings):
        settings.DEFAULT_FROM_EMAIL = 'tracker@example.com'

        assert send_email(to_email='someone@example.com', subject='Hello', body='<p>Hi <b>there</b></p>')

        message = mail.outbox[0]
        assert message.to == ['someone@example.com']
        assert message.from_email == 'tracker@example.com'
        assert message.body == 'Hi there'
        assert message.alternatives[0][0] == '<p>Hi <b>there</b></p>'

    def test_send_email_backend_failure(self):
        with patch('apps.common.email.send_mail', side_effect=ConnectionRefusedError('no smtp')):
            with pytest.raises(EmailDeliveryError):
                send_email(to_email='someone@example.com', subject='Hello', body='<p>Hi</p>')
