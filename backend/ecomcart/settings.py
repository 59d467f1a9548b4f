import os
import sys
from pathlib import Path
from urllib.parse import unquote, urlsplit

from dotenv import load_dotenv
from django.core.exceptions import ImproperlyConfigured

BASE_DIR = Path(__file__).resolve().parent.parent
# Try root project .env (one directory up from BASE_DIR) first, then local
root_env = (BASE_DIR.parent / '.env')
local_env = (BASE_DIR / '.env')
if root_env.exists():
    load_dotenv(root_env)
elif local_env.exists():
    load_dotenv(local_env)

_candidate_key = (
    os.getenv('DJANGO_SECRET_KEY')
    or os.getenv('SECRET_KEY')
    or ''
)
SECRET_KEY = _candidate_key if _candidate_key else 'dev-secret-key'
DEBUG = os.getenv('DEBUG', 'True') == 'True'
ALLOWED_HOSTS = os.getenv('ALLOWED_HOSTS', '*').split(',')

if SECRET_KEY == 'dev-secret-key' and not DEBUG:
    raise ImproperlyConfigured(
        'SECRET_KEY is missing or using insecure default. Set DJANGO_SECRET_KEY or SECRET_KEY env var.'
    )

PORT = int(os.getenv('PORT', '5001'))
API_BASE_URL = os.getenv('API_BASE_URL', f'http://localhost:{PORT}/api')
_cors_origins = [
    origin.strip()
    for origin in os.getenv('CORS_ALLOWED_ORIGINS', '*').split(',')
    if origin.strip()
]
# django-cors-headers; '*' (the default) opens the API to every origin
CORS_ALLOW_ALL_ORIGINS = '*' in _cors_origins
CORS_ALLOWED_ORIGINS = [] if CORS_ALLOW_ALL_ORIGINS else _cors_origins
CORS_ALLOW_CREDENTIALS = os.getenv('CORS_ALLOW_CREDENTIALS', 'False') == 'True'
CORS_PREFLIGHT_MAX_AGE = int(os.getenv('CORS_PREFLIGHT_MAX_AGE', '86400'))

INSTALLED_APPS = [
    'django.contrib.auth',
    'django.contrib.contenttypes',
    # apps.common ships the PORT-aware runserver and must precede staticfiles
    'apps.common',
    'django.contrib.staticfiles',
    'corsheaders',
    'rest_framework',
    'drf_spectacular',
    'apps.catalog',
    'apps.carts',
    'apps.checkout',
]

REST_FRAMEWORK = {
    'DEFAULT_RENDERER_CLASSES': [
        'rest_framework.renderers.JSONRenderer',
    ],
    'DEFAULT_PARSER_CLASSES': [
        'rest_framework.parsers.JSONParser',
    ],
    'DEFAULT_AUTHENTICATION_CLASSES': [],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.AllowAny',
    ],
    'UNAUTHENTICATED_USER': None,
    'EXCEPTION_HANDLER': 'apps.api.exceptions.global_exception_handler',
    'DEFAULT_SCHEMA_CLASS': 'drf_spectacular.openapi.AutoSchema',
}

SPECTACULAR_SETTINGS = {
    'TITLE': 'E-Commerce Cart API',
    'DESCRIPTION': 'Product catalog, process-wide shopping cart and mock checkout.',
    'VERSION': '1.0.0',
    'SERVE_INCLUDE_SCHEMA': False,
    'COMPONENT_SPLIT_REQUEST': True,
    'SCHEMA_PATH_PREFIX': r'/api',
    'SERVE_PERMISSIONS': [],
}

MIDDLEWARE = [
    'corsheaders.middleware.CorsMiddleware',
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'ecomcart.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
            ],
        },
    },
]

WSGI_APPLICATION = 'ecomcart.wsgi.application'

# ---------------------------------------------------------------------------
# PERSISTENCE
# DATABASE_URL selects the ORM-backed document adapter. Anything that is not a
# postgres or sqlite URL leaves DATABASES empty and the stores run purely on
# their in-process state.
# ---------------------------------------------------------------------------
PERSISTENCE_TIMEOUT_SECONDS = float(os.getenv('PERSISTENCE_TIMEOUT_SECONDS', '3'))


def _database_from_url(url, timeout):
    if not url:
        return None
    parts = urlsplit(url)
    scheme = parts.scheme.lower()
    if scheme in ('postgres', 'postgresql'):
        return {
            'ENGINE': 'django.db.backends.postgresql',
            'NAME': unquote(parts.path.lstrip('/')) or 'ecomcart',
            'USER': unquote(parts.username or ''),
            'PASSWORD': unquote(parts.password or ''),
            'HOST': parts.hostname or 'localhost',
            'PORT': str(parts.port or 5432),
            'OPTIONS': {
                'connect_timeout': max(1, int(timeout)),
                'options': f'-c statement_timeout={int(timeout * 1000)}',
            },
        }
    if scheme == 'sqlite':
        # sqlite:///relative.db and sqlite:////absolute/path.db
        path = unquote(parts.path)[1:] if parts.path.startswith('/') else unquote(parts.path)
        return {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': path or str(BASE_DIR / 'db.sqlite3'),
            'OPTIONS': {'timeout': timeout},
        }
    return None


DATABASE_URL = os.getenv('DATABASE_URL', '')
_default_database = _database_from_url(DATABASE_URL, PERSISTENCE_TIMEOUT_SECONDS)
DATABASES = {'default': _default_database} if _default_database else {}
PERSISTENCE_ENABLED = _default_database is not None

# Use SQLite for tests so the ORM adapter is exercised without Postgres
USING_PYTEST = (
    'pytest' in sys.modules
    or os.getenv('PYTEST_CURRENT_TEST') is not None
    or any(os.path.basename(arg).startswith('pytest') for arg in sys.argv)
)

if 'test' in sys.argv or USING_PYTEST:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': BASE_DIR / 'db.sqlite3',
        }
    }
    PERSISTENCE_ENABLED = True

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'plain': {
            'format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'plain',
        },
    },
    'loggers': {
        'apps': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
    },
}

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

STATIC_URL = 'static/'
STATIC_ROOT = os.getenv('STATIC_ROOT', str(BASE_DIR / 'staticfiles'))
DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'
