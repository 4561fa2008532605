from urllib.parse import urlparse

from django.conf import settings
from django.db import connection
from django.http import JsonResponse
from django.utils import timezone


def _database_status():
    with connection.cursor() as cursor:
        cursor.execute("SELECT 1")
        cursor.fetchone()
    return "connected"


def health_check(request):
    """
    Report whether the server can reach its database and has an AI gateway key.

    A missing key is reported but does not make the service unhealthy; the
    chat endpoint answers 500 on its own in that case.
    """
    errors = []
    try:
        database = _database_status()
    except Exception as e:
        database = "disconnected"
        errors.append(f"Database error: {e}")

    data = {
        "status": "unhealthy" if errors else "healthy",
        "timestamp": timezone.now().isoformat(),
        "environment": "development" if settings.DEBUG else "production",
        "services": {
            "database": database,
            "ai_gateway": "configured" if settings.AI_GATEWAY_API_KEY else "missing_api_key",
        },
        "gateway": {
            "host": urlparse(settings.AI_GATEWAY_URL).netloc,
            "model": settings.AI_GATEWAY_MODEL,
        },
    }
    if errors:
        data["errors"] = errors

    return JsonResponse(data, status=503 if errors else 200)
