"""Production settings for Front Desk project.

This module extends the base settings with production specific
configuration. Ensure that sensitive values are provided via
environment variables and that security settings are appropriate for
production use.
"""

from django.core.exceptions import ImproperlyConfigured  # type: ignore

from .base import *  # noqa: F401,F403

# Never run with debug enabled in production
DEBUG = False

# Allowed hosts should be defined explicitly via environment variable
ALLOWED_HOSTS = os.environ.get('DJANGO_ALLOWED_HOSTS', '').split(',')  # noqa: F405

if SECRET_KEY == 'replace-me-in-production':  # noqa: F405
    raise ImproperlyConfigured("DJANGO_SECRET_KEY must be set in production")

if ENCRYPTION_KEY == 'dev-encryption-key-replace-in-production':  # noqa: F405
    raise ImproperlyConfigured("ENCRYPTION_KEY must be set in production")

# Configure secure proxies and cookies
CSRF_COOKIE_SECURE = True
SESSION_COOKIE_SECURE = True
SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')
