"""
WSGI config for kitchenpos project.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'kitchenpos.settings')

application = get_wsgi_application()
