"""
Test settings for the species catalog project.
"""
from .base import *

DEBUG = False

# Fast, throwaway database
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

# Cheap hashing keeps user fixtures fast
PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

# No rate limits in tests
REST_FRAMEWORK = {
    **REST_FRAMEWORK,
    'DEFAULT_THROTTLE_CLASSES': [],
}

# Console only, and quiet
LOGGING['root']['handlers'] = ['console']
LOGGING['root']['level'] = 'WARNING'
for logger_config in LOGGING['loggers'].values():
    logger_config['handlers'] = ['console']
    logger_config['level'] = 'WARNING'
del LOGGING['handlers']['file']
