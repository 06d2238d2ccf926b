"""WSGI entry point for the console.

gunicorn loads ``config.wsgi:application`` (see gunicorn.conf.py). Production
deployments set DJANGO_SETTINGS_MODULE=config.settings.prod; without it the
dev settings are used.
"""

from __future__ import annotations

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.dev")

application = get_wsgi_application()
