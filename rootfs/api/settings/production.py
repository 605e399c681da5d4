"""
Django settings for the routecheck project.
"""
import random
import string
import os.path


def randstr(k):
    return ''.join(random.choices(string.ascii_lowercase + string.digits, k=k))


# A boolean that turns on/off debug mode.
# https://docs.djangoproject.com/en/stable/ref/settings/#debug
DEBUG = os.environ.get('ROUTECHECK_DEBUG', 'false').lower() == "true"

# If set to True, Django's normal exception handling of view functions
# will be suppressed, and exceptions will propagate upwards
# https://docs.djangoproject.com/en/stable/ref/settings/#debug-propagate-exceptions
DEBUG_PROPAGATE_EXCEPTIONS = False

# Silence security messages around SSL as the ingress takes care of them
# https://docs.djangoproject.com/en/stable/ref/checks/#security
SILENCED_SYSTEM_CHECKS = [
    'security.W004',
    'security.W008',
    'security.W012',
    'security.W016',
]

# SECURITY: change this to allowed fqdn's to prevent host poisioning attacks
# https://docs.djangoproject.com/en/stable/ref/settings/#allowed-hosts
ALLOWED_HOSTS = ['*']

TIME_ZONE = os.environ.get('TZ', 'UTC')
LANGUAGE_CODE = 'en-us'
USE_I18N = False
USE_TZ = True

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
    'api.middleware.APIVersionMiddleware',
]

ROOT_URLCONF = 'routecheck.urls'

ASGI_APPLICATION = 'api.asgi.application'

INSTALLED_APPS = (
    'django.contrib.auth',
    'django.contrib.contenttypes',
    # Third-party apps
    'rest_framework',
    # routecheck apps
    'api',
)

# routes are validated in memory, nothing is persisted
DATABASES = {}

SECURE_CONTENT_TYPE_NOSNIFF = True

# Honor HTTPS from a trusted proxy
# see https://docs.djangoproject.com/en/stable/ref/settings/#secure-proxy-ssl-header
SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')

REST_FRAMEWORK = {
    'DEFAULT_PERMISSION_CLASSES': (
        'rest_framework.permissions.AllowAny',
    ),
    'DEFAULT_AUTHENTICATION_CLASSES': (),
    'UNAUTHENTICATED_USER': None,
    'DEFAULT_RENDERER_CLASSES': (
        'rest_framework.renderers.JSONRenderer',
    ),
    'DEFAULT_PARSER_CLASSES': (
        'rest_framework.parsers.JSONParser',
    ),
    'TEST_REQUEST_DEFAULT_FORMAT': 'json',
    'EXCEPTION_HANDLER': 'api.exceptions.custom_exception_handler'
}

# URLs that end with slashes are ugly
APPEND_SLASH = False

LOG_LEVEL = os.environ.get('ROUTECHECK_LOG_LEVEL', 'INFO').upper()

# See http://docs.djangoproject.com/en/dev/topics/logging for
# more details on how to customize your logging configuration.
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'root': {'level': 'DEBUG' if DEBUG else 'WARN'},
    'formatters': {
        'verbose': {
            'format': '%(levelname)s %(asctime)s %(module)s %(process)d %(thread)d %(message)s'
        },
        'simple': {
            'format': '%(levelname)s %(message)s'
        },
    },
    'filters': {
        'require_debug_true': {
            '()': 'django.utils.log.RequireDebugTrue'
        }
    },
    'handlers': {
        'null': {
            'level': 'DEBUG',
            'class': 'logging.NullHandler',
        },
        'console': {
            'level': 'DEBUG',
            'class': 'logging.StreamHandler',
            'formatter': 'verbose' if DEBUG else 'simple'
        }
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'filters': ['require_debug_true'],
            'propagate': True,
        },
        'django.request': {
            'handlers': ['console'],
            'level': 'WARNING',
            'filters': ['require_debug_true'],
            'propagate': True,
        },
        'api': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': True,
        },
    }
}
TEST_RUNNER = 'api.tests.SilentDjangoTestSuiteRunner'

# Django secret key
SECRET_KEY = os.environ.get('ROUTECHECK_SECRET_KEY', randstr(64))

# routecheck admission webhook key, the webhook is disabled without it
ADMISSION_KEY_PATH = os.environ.get(
    'ROUTECHECK_ADMISSION_KEY_PATH', '/etc/routecheck/admission/key')
if os.path.exists(ADMISSION_KEY_PATH):
    with open(ADMISSION_KEY_PATH) as f:
        ADMISSION_KEY = f.read().strip()
else:
    ADMISSION_KEY = None

# maximum number of rules accepted in one route
ROUTECHECK_MAX_RULES = int(os.environ.get('ROUTECHECK_MAX_RULES', '16'))
