"""
Health check views.
"""
import logging

from django.conf import settings
from django.core.cache import cache
from django.db import connection, DatabaseError
from django.utils import timezone
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

logger = logging.getLogger(__name__)


@extend_schema(tags=['Health'])
class HealthCheckView(APIView):
    """Basic health check endpoint."""
    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(summary="Service status")
    def get(self, request):
        return Response(
            {
                'status': 'healthy',
                'service': settings.SERVICE_NAME,
                'version': settings.SERVICE_VERSION,
                'timestamp': timezone.now().isoformat(),
            },
            status=status.HTTP_200_OK,
        )


@extend_schema(tags=['Health'])
class ReadinessCheckView(APIView):
    """Readiness probe, checks the database and the cache."""
    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(summary="Dependency readiness")
    def get(self, request):
        checks = {
            'database': self._check_database(),
            'cache': self._check_cache(),
        }

        all_healthy = all(check['healthy'] for check in checks.values())
        status_code = status.HTTP_200_OK if all_healthy else status.HTTP_503_SERVICE_UNAVAILABLE

        return Response(
            {
                'status': 'ready' if all_healthy else 'not_ready',
                'checks': checks,
            },
            status=status_code,
        )

    def _check_database(self):
        try:
            with connection.cursor() as cursor:
                cursor.execute('SELECT 1')
            return {'healthy': True}
        except DatabaseError as e:
            logger.warning("Database readiness check failed: %s", e)
            return {'healthy': False, 'error': str(e)}

    def _check_cache(self):
        try:
            cache.set('health_check', 'ok', 10)
            value = cache.get('health_check')
            return {'healthy': value == 'ok'}
        except Exception as e:  # backend-specific connection errors
            logger.warning("Cache readiness check failed: %s", e)
            return {'healthy': False, 'error': str(e)}


@extend_schema(tags=['Health'])
class LivenessCheckView(APIView):
    """Liveness probe."""
    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(summary="Process liveness")
    def get(self, request):
        return Response({'status': 'alive'}, status=status.HTTP_200_OK)
