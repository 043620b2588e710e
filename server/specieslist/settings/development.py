"""
Development settings for the species catalog project.
"""
from .base import *

# Override DEBUG for development
DEBUG = True

# Allow all hosts in development
ALLOWED_HOSTS = ['*']

# Development-specific apps
INSTALLED_APPS += [
    'debug_toolbar',
]

# Development-specific middleware
MIDDLEWARE += [
    'debug_toolbar.middleware.DebugToolbarMiddleware',
]

# Email backend for development (prints to console)
EMAIL_BACKEND = 'django.core.mail.backends.console.EmailBackend'

# Debug toolbar configuration
INTERNAL_IPS = [
    '127.0.0.1',
    'localhost',
]

DEBUG_TOOLBAR_CONFIG = {
    'SHOW_TOOLBAR_CALLBACK': lambda _request: DEBUG,
}

# Disable template caching in development
for template_engine in TEMPLATES:
    template_engine['OPTIONS']['debug'] = True

# Less strict CORS in development
CORS_ALLOW_ALL_ORIGINS = True

# Logging - more verbose in development
LOGGING['loggers']['django']['level'] = 'DEBUG'
LOGGING['loggers']['specieslist']['level'] = 'DEBUG'
LOGGING['loggers']['species']['level'] = 'DEBUG'
