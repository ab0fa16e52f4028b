import sys
from datetime import timedelta

from .base import *

INSTALLED_APPS += [
    'corsheaders',
    'rest_framework',
    'drf_spectacular',
    'apps.shared',
    'apps.accounts',
    'apps.events',
]

REST_FRAMEWORK = {
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.IsAuthenticated',
    ],
    'DEFAULT_SCHEMA_CLASS': 'drf_spectacular.openapi.AutoSchema',
    'DEFAULT_AUTHENTICATION_CLASSES': [
        'apps.shared.auth.authentication.BearerTokenAuthentication',
    ],
    'DEFAULT_RENDERER_CLASSES': [
        'rest_framework.renderers.JSONRenderer',
    ],
    'EXCEPTION_HANDLER': 'apps.shared.exceptions.api_handler.custom_exception_handler',
    'TEST_REQUEST_DEFAULT_FORMAT': 'json',
}

AUTH_USER_MODEL = 'accounts.CustomUser'

MIDDLEWARE = [
    'corsheaders.middleware.CorsMiddleware',
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

# Routes are matched with and without the trailing slash by the URLconf itself
APPEND_SLASH = False

# Environment
TESTING_ENVIRONMENT = 'testing'
PRODUCTION_ENVIRONMENT = 'production'
DEVELOPMENT_ENVIRONMENT = 'development'

if 'test' in sys.argv or 'pytest' in sys.modules:  # noqa: SIM108
    ENVIRONMENT = TESTING_ENVIRONMENT
else:
    ENVIRONMENT = env('ENVIRONMENT', default=DEVELOPMENT_ENVIRONMENT)

if ENVIRONMENT == TESTING_ENVIRONMENT:
    PASSWORD_HASHERS = [
        'django.contrib.auth.hashers.MD5PasswordHasher',
    ]
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': ':memory:',
        }
    }

# CORS
CORS_ALLOW_CREDENTIALS = True
CORS_ALLOWED_ORIGINS = [
    env('FRONTEND_URL', default='http://localhost:3000'),
]

CORS_ALLOW_HEADERS = [
    'accept',
    'accept-encoding',
    'authorization',
    'content-type',
    'origin',
    'user-agent',
    'x-requested-with',
]

# Swagger
SPECTACULAR_SETTINGS = {
    'TITLE': 'CampusConnect API',
    'DESCRIPTION': 'College event management: events, registrations and admin statistics',
    'VERSION': 'v1',
    'SERVE_INCLUDE_SCHEMA': False,
}

# Bearer token configuration
JWT_SECRET = env.str('JWT_SECRET', default='dev-jwt-secret-change-in-production')
JWT_ALGORITHM = 'HS256'
JWT_ISSUER = 'campusconnect-api'
JWT_ACCESS_TOKEN_LIFETIME = timedelta(hours=env.int('JWT_ACCESS_TOKEN_LIFETIME_HOURS', default=24))

# Logging
LOG_LEVEL = env.str(
    'LOG_LEVEL',
    default='ERROR' if ENVIRONMENT == PRODUCTION_ENVIRONMENT else 'INFO',
)

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{asctime} {levelname} {name} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': LOG_LEVEL,
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'WARNING',
            'propagate': False,
        },
    },
}
