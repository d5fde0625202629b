"""
Tests for the health check endpoints.
"""
import pytest


class TestHealthEndpoints:
    """Tests for health, readiness and liveness."""

    def test_health(self, api_client, settings):
        response = api_client.get('/api/health/')

        assert response.status_code == 200
        assert response.data['status'] == 'healthy'
        assert response.data['service'] == settings.SERVICE_NAME

    @pytest.mark.django_db
    def test_ready(self, api_client):
        response = api_client.get('/api/health/ready/')

        assert response.status_code == 200
        assert response.data['checks']['database']['healthy'] is True
        assert response.data['checks']['cache']['healthy'] is True

    def test_live(self, api_client):
        assert api_client.get('/api/health/live/').data == {'status': 'alive'}
