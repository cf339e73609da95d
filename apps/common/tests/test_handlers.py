"""Project-level handlers: health check, JSON 404 and the DRF exception handler."""

import pytest
from unittest.mock import patch
from django.urls import reverse
from rest_framework import status


@pytest.mark.django_db
class TestProjectHandlers:

    def test_health_check(self, api_client):
        response = api_client.get(reverse('health-check'))

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {'status': 'ok'}

    def test_unknown_url_returns_json_404(self, api_client):
        response = api_client.get('/api/does-not-exist/')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {'error': 'Not found', 'status': 404}

    def test_unhandled_error_returns_json_500(self, authenticated_client):
        with patch('apps.incomes.views.count_incomes', side_effect=RuntimeError('boom')):
            response = authenticated_client.get(reverse('incomes:income-count'))

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data == {'error': 'Internal server error', 'status': 500}

    def test_schema_is_generated(self, api_client):
        response = api_client.get(reverse('api-schema'))

        assert response.status_code == status.HTTP_200_OK
