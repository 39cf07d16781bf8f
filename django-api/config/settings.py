"""Django settings, populated from AppSettings (environment and .env)."""

from config.app_settings import app_settings
from config.loguru_config import setup_logging

SECRET_KEY = app_settings.SECRET_KEY.get_secret_value()
DEBUG = app_settings.DEBUG
ALLOWED_HOSTS = app_settings.ALLOWED_HOSTS

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "rest_framework",
    "events.apps.EventsConfig",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "events.handlers.middleware.SessionContextMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "config.urls"
WSGI_APPLICATION = "config.wsgi.application"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

DATABASES = {
    "default": {
        "ENGINE": app_settings.DATABASE_ENGINE,
        "NAME": app_settings.DATABASE_NAME,
        "USER": app_settings.DATABASE_USER,
        "PASSWORD": app_settings.DATABASE_PASSWORD.get_secret_value(),
        "HOST": app_settings.DATABASE_HOST,
        "PORT": app_settings.DATABASE_PORT,
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "rest_framework.authentication.SessionAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "EXCEPTION_HANDLER": "events.handlers.exceptions.domain_exception_handler",
}

# loguru owns logging; Django's dictConfig is skipped.
LOGGING_CONFIG = None
setup_logging(app_settings.LOG_LEVEL)

EVENT_CATEGORIES = app_settings.EVENT_CATEGORIES
BOOKING_REDIRECT_TARGET = app_settings.BOOKING_REDIRECT_TARGET
BOOKING_REDIRECT_DELAY_SECONDS = app_settings.BOOKING_REDIRECT_DELAY_SECONDS
ATOMIC_SEAT_DECREMENT = app_settings.ATOMIC_SEAT_DECREMENT
