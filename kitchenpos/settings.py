"""
Django settings for kitchenpos project.

Every value that differs between environments is read from an environment variable.
"""
import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

# ── Security ──────────────────────────────────────────────────
SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'kitchenpos-dev-key-replace-before-deployment')

DEBUG = os.environ.get('DJANGO_DEBUG', 'true').lower() == 'true'

ALLOWED_HOSTS = [host for host in os.environ.get('DJANGO_ALLOWED_HOSTS', 'localhost,127.0.0.1').split(',') if host]

# ── Installed Apps ────────────────────────────────────────────
INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.auth',
    'django.contrib.staticfiles',
    'rest_framework',
    'django_filters',
    'drf_yasg',
    'catalog',
    'orders',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
]

ROOT_URLCONF = 'kitchenpos.urls'
WSGI_APPLICATION = 'kitchenpos.wsgi.application'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
            ],
        },
    },
]

# ── Database ──────────────────────────────────────────────────
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': os.environ.get('KITCHENPOS_DB_PATH', str(BASE_DIR / 'db.sqlite3')),
        'ATOMIC_REQUESTS': False,
    }
}

# ── Internationalization ──────────────────────────────────────
LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

STATIC_URL = 'static/'

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# ── REST Framework ────────────────────────────────────────────
# Authentication is handled in front of this service
REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.AllowAny',
    ],
    'UNAUTHENTICATED_USER': None,
    'DEFAULT_FILTER_BACKENDS': ['django_filters.rest_framework.DjangoFilterBackend'],
    'EXCEPTION_HANDLER': 'common.exceptions.custom_exception_handler',
    'COERCE_DECIMAL_TO_STRING': True,
}

SWAGGER_SETTINGS = {
    'USE_SESSION_AUTH': False,
}

# ── External services ─────────────────────────────────────────
KITCHENPOS_PROFANITY_CHECKER = os.environ.get(
    'KITCHENPOS_PROFANITY_CHECKER', 'common.profanity.PurgomalumClient'
)
KITCHENPOS_PROFANITY_URL = os.environ.get(
    'KITCHENPOS_PROFANITY_URL', 'https://www.purgomalum.com/service/containsprofanity'
)
KITCHENPOS_PROFANITY_TIMEOUT = float(os.environ.get('KITCHENPOS_PROFANITY_TIMEOUT', '3'))

KITCHENPOS_DELIVERY_DISPATCHER = os.environ.get(
    'KITCHENPOS_DELIVERY_DISPATCHER', 'orders.delivery.KitchenridersClient'
)
KITCHENPOS_DELIVERY_URL = os.environ.get(
    'KITCHENPOS_DELIVERY_URL', 'http://localhost:8090/api/deliveries'
)
KITCHENPOS_DELIVERY_TIMEOUT = float(os.environ.get('KITCHENPOS_DELIVERY_TIMEOUT', '5'))

# ── Logging ───────────────────────────────────────────────────
LOG_LEVEL = os.environ.get('KITCHENPOS_LOG_LEVEL', 'INFO').upper()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'standard': {
            'format': '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            'datefmt': '%Y-%m-%d %H:%M:%S',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'standard',
        },
    },
    'loggers': {
        'catalog': {'handlers': ['console'], 'level': LOG_LEVEL, 'propagate': True},
        'orders': {'handlers': ['console'], 'level': LOG_LEVEL, 'propagate': True},
        'common': {'handlers': ['console'], 'level': LOG_LEVEL, 'propagate': True},
    },
}
