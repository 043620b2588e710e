"""
WSGI config for the species catalog project.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'specieslist.settings.production')

application = get_wsgi_application()
