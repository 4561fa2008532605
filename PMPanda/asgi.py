"""
ASGI config for PMPanda project.

It exposes the ASGI callable as a module-level variable named ``application``.

For more information on this file, see
https://docs.djangoproject.com/en/4.2/howto/deployment/asgi/
"""

import os

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'PMPanda.settings')

from django.contrib.staticfiles.handlers import ASGIStaticFilesHandler
from django.core.asgi import get_asgi_application

application = get_asgi_application()

# Wrap the entire application with ASGIStaticFilesHandler for static file serving in development
application = ASGIStaticFilesHandler(application)
