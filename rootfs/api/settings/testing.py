from api.settings.production import *  # noqa

# A boolean that turns on/off debug mode.
# https://docs.djangoproject.com/en/stable/ref/settings/#debug
DEBUG = True

# If set to True, Django's normal exception handling of view functions
# will be suppressed, and exceptions will propagate upwards
# https://docs.djangoproject.com/en/stable/ref/settings/#debug-propagate-exceptions
DEBUG_PROPAGATE_EXCEPTIONS = True

SECRET_KEY = 'routecheck-testing-secret-key'

# serve the admission webhook during tests
ADMISSION_KEY = 'testing-admission-key'

ROUTECHECK_MAX_RULES = 16
