"""WSGI entrypoint for the ecomcart backend."""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'ecomcart.settings')

application = get_wsgi_application()
