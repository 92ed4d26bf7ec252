import logging
import os

from corsheaders.defaults import default_headers
from datetime import timedelta
from dotenv import load_dotenv

load_dotenv()

PROJECT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

ROOT_DIR = os.path.dirname(PROJECT_DIR)


def env_bool(name, default='False'):
    return os.environ.get(name, default).strip().lower() in ('true', '1', 'yes')


def env_list(name, default=''):
    return [
        item.strip() for item in os.environ.get(name, default).split(',')
        if item.strip()
    ]


DEBUG = env_bool('DEBUG')

DJANGO_APPS = (
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
)

THIRD_PARTY_APPS = (
    'corsheaders',
    'rest_framework',
    'django_filters',
)

PROJECT_APPS = (
    'hireflow.common',
    'hireflow.organization',
    'hireflow.recruitment',
)

INSTALLED_APPS = DJANGO_APPS + THIRD_PARTY_APPS + PROJECT_APPS

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

ROOT_URLCONF = 'config.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'config.wsgi.application'

AUTH_PASSWORD_VALIDATORS = [
    {
        'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.NumericPasswordValidator',
    },
]

# Internationalization
TIME_ZONE = os.environ.get('TIME_ZONE', 'UTC')

LANGUAGE_CODE = 'en'

USE_I18N = True

USE_TZ = True

# Static Files Configuration
DEFAULT_STATIC_ROOT = os.path.join(ROOT_DIR, 'static/')
STATIC_ROOT = os.environ.get('STATIC_ROOT', DEFAULT_STATIC_ROOT)
STATIC_URL = '/static/'
# /Static Files Configuration

CORS_ALLOW_HEADERS = default_headers + (
    'Accept-Confirm',
)

CORS_ORIGIN_ALLOW_ALL = env_bool('CORS_ORIGIN_ALLOW_ALL')
CORS_ALLOWED_ORIGINS = env_list('CORS_ALLOWED_ORIGINS')

# Begin Feedback Sync Config
# Client decisions on shared shortlists are propagated into the
# application pipeline only while this is enabled. Feedback itself is
# always recorded.
FEEDBACK_SYNC_ENABLED = env_bool('ENABLE_FEEDBACK_SYNC', 'True')

# Shortlists of this agency never persist feedback or status changes.
DEMO_AGENCY_SLUG = os.environ.get('DEMO_AGENCY_SLUG', 'demo-agency')

FEEDBACK_THROTTLE_RATE = os.environ.get('FEEDBACK_THROTTLE_RATE', '30/min')

SHARE_TOKEN_BYTES = int(os.environ.get('SHARE_TOKEN_BYTES', 12))
# End Feedback Sync Config

# Rest Framework Config
DRF_RENDERER_CLASSES = ['rest_framework.renderers.JSONRenderer']
DRF_AUTH_CLASSES = [
    'rest_framework_simplejwt.authentication.JWTAuthentication',
    'rest_framework.authentication.SessionAuthentication'
]

DRF_BROWSABLE_API = env_bool('DRF_BROWSABLE_API')

if DRF_BROWSABLE_API:
    DRF_RENDERER_CLASSES.append('rest_framework.renderers.BrowsableAPIRenderer')

REST_FRAMEWORK = {
    'DEFAULT_PERMISSION_CLASSES': (
        'rest_framework.permissions.IsAuthenticated',
    ),
    'DEFAULT_AUTHENTICATION_CLASSES': DRF_AUTH_CLASSES,
    'DEFAULT_PAGINATION_CLASS': 'hireflow.core.pagination.LimitZeroNoResultsPagination',
    'PAGE_SIZE': 20,
    'DEFAULT_FILTER_BACKENDS': (
        'django_filters.rest_framework.DjangoFilterBackend',
    ),
    'DEFAULT_RENDERER_CLASSES': DRF_RENDERER_CLASSES,
    'DEFAULT_THROTTLE_RATES': {
        'feedback': FEEDBACK_THROTTLE_RATE,
    },
}
# End Rest Framework Config

# Begin Access/Refresh Token Config
ACCESS_TOKEN_LIFETIME = os.environ.get('ACCESS_TOKEN_LIFETIME', '6;hours')
REFRESH_TOKEN_LIFETIME = os.environ.get('REFRESH_TOKEN_LIFETIME', '7;days')


def generate_timedelta(td_string):
    try:
        _duration, _type = td_string.split(';')
        return timedelta(**{_type: int(_duration)})
    except (ValueError, TypeError):
        raise ValueError(f"{td_string} is invalid. use 5;minutes OR 30;days format")


SIMPLE_JWT = {
    'ACCESS_TOKEN_LIFETIME': generate_timedelta(ACCESS_TOKEN_LIFETIME),
    'REFRESH_TOKEN_LIFETIME': generate_timedelta(REFRESH_TOKEN_LIFETIME),
    'ROTATE_REFRESH_TOKENS': True,
    'AUTH_HEADER_TYPES': ('Bearer',),
    'USER_ID_FIELD': 'id',
    'USER_ID_CLAIM': 'user_id',
}
# End Access/Refresh Token Config

SECRET_KEY = os.environ.get('SECRET_KEY', 'hireflow-development-secret-key-change-me')

ENVIRONMENT = os.environ.get('ENVIRONMENT', 'development')

if os.environ.get('DATABASE_NAME'):
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.postgresql',
            'NAME': os.environ.get('DATABASE_NAME'),
            'USER': os.environ.get('DATABASE_USER', None),
            'PASSWORD': os.environ.get('DATABASE_PASSWORD', None),
            'HOST': os.environ.get('DATABASE_HOST', 'localhost'),
            'PORT': os.environ.get('DATABASE_PORT', '5432'),
        },
    }
else:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': os.path.join(PROJECT_DIR, 'db.sqlite3'),
        },
    }

DEFAULT_AUTO_FIELD = 'django.db.models.AutoField'

CACHES_REDIS_URL = os.environ.get('CACHES_REDIS_URL')
if CACHES_REDIS_URL:
    CACHES = {
        "default": {
            "BACKEND": "django_redis.cache.RedisCache",
            "LOCATION": CACHES_REDIS_URL,
            "TIMEOUT": int(os.environ.get('CACHE_TIMEOUT', '300')),
            "OPTIONS": {
                "CLIENT_CLASS": "django_redis.client.DefaultClient"
            },
        }
    }
else:
    CACHES = {
        "default": {
            "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        }
    }

FRONTEND_URL = os.environ.get('FRONTEND_URL', "http://localhost:3000")
BACKEND_URL = os.environ.get('BACKEND_URL', 'http://localhost:8000')

ALLOWED_HOSTS = env_list('ALLOWED_HOSTS', 'localhost,127.0.0.1,testserver')

SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')

SHOW_LOGS_ON_CONSOLE = env_bool('SHOW_LOGS_ON_CONSOLE')

# LOGGING FORMATS AND CONFIGURATIONS
LOG_DIRECTORY = os.environ.get(
    'LOG_DIRECTORY',
    os.path.join(
        PROJECT_DIR if ENVIRONMENT == 'development' else ROOT_DIR,
        'logs'
    )
)
if not os.path.exists(LOG_DIRECTORY):
    os.makedirs(LOG_DIRECTORY, exist_ok=True)

extend_logging = dict()
extend_handlers = dict()


class RequireConsoleLog(logging.Filter):
    def filter(self, record):
        allowed_site_packages = ('django', 'rest_framework')
        if 'site-packages' in record.pathname:
            return any([x in record.pathname for x in allowed_site_packages])
        return SHOW_LOGS_ON_CONSOLE


for module in PROJECT_APPS:
    extend_logging.update({
        module: {
            'handlers': [module, 'console'],
            'level': 'DEBUG',
            'propagate': False,
        }
    })
    extend_handlers.update({
        module: {
            'level': 'DEBUG',
            'class': 'logging.handlers.TimedRotatingFileHandler',
            'formatter': 'verbose',
            'filename': os.path.join(
                LOG_DIRECTORY, module.split('.')[1] + '.log'
            ),
            'when': 'midnight',
            'delay': True,
        }
    })

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '\n%(levelname)s %(asctime)s %(module)s %(process)d %(thread)d %(message)s',
        },
        'simple': {
            'format': '{levelname} {message} -->from [{module}]',
            'style': '{'
        },
    },
    'filters': {
        'require_console_log': {
            '()': RequireConsoleLog
        }
    },
    'handlers': {
        'default': {
            'level': 'DEBUG',
            'class': 'logging.handlers.TimedRotatingFileHandler',
            'filename': os.path.join(LOG_DIRECTORY, 'debug.log'),
            'formatter': 'verbose',
            'when': 'midnight',
            'delay': True,
        },
        'console': {
            'level': 'DEBUG',
            'filters': ['require_console_log'],
            'class': 'logging.StreamHandler',
            'formatter': 'simple'
        },
        'django': {
            'level': 'INFO',
            'class': 'logging.FileHandler',
            'filename': os.path.join(LOG_DIRECTORY, 'django.log'),
            'formatter': 'verbose',
            'delay': True,
        },
        **extend_handlers
    },
    'loggers': {
        '': {
            'handlers': ['default', 'console'],
            'level': 'INFO',
            'propagate': False,
        },
        'django': {
            'handlers': ['django'],
            'level': 'INFO',
            'propagate': False,
        },
        **extend_logging
    },
}

# BEGIN Sentry Configurations
# https://docs.sentry.io/platforms/python/guides/django/
SENTRY_DSN = os.environ.get('SENTRY_DSN', '')
if SENTRY_DSN:
    import sentry_sdk
    from sentry_sdk.integrations.django import DjangoIntegration
    sentry_sdk.init(
        dsn=SENTRY_DSN,
        integrations=[DjangoIntegration()],
        server_name=BACKEND_URL,
    )
# END Sentry Configurations
