"""Base settings for the events site.

Values come from the environment (or a .env file) through python-decouple.
"""

from pathlib import Path

from decouple import Csv, config

VERSION = "1.0.0"

BASE_DIR = Path(__file__).resolve().parent.parent.parent

DEBUG = config("DEBUG", default=False, cast=bool)
SECRET_KEY = config("SECRET_KEY", default="insecure-development-key-change-me")
ALLOWED_HOSTS = config("ALLOWED_HOSTS", default="localhost,127.0.0.1,testserver", cast=Csv())

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "django.contrib.staticfiles",
    "django.contrib.sitemaps",
    "rest_framework",
    "events.apps.EventsConfig",
    "tickets.apps.TicketsConfig",
    "frontend.apps.FrontendConfig",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "frontend.middleware.LocaleRedirectMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "eventhub.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "frontend.context_processors.site",
            ],
        },
    },
]

WSGI_APPLICATION = "eventhub.wsgi.application"
ASGI_APPLICATION = "eventhub.asgi.application"

# No database: events and tickets live in in-memory stores.
DATABASES: dict = {}

# Internationalization
LANGUAGE_CODE = "en"
LANGUAGES = [
    ("en", "English"),
    ("ar", "العربية"),
]
LANGUAGE_COOKIE_NAME = "locale"
LANGUAGE_COOKIE_AGE = 60 * 60 * 24 * 365
TIME_ZONE = config("TIME_ZONE", default="UTC")
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
        "rest_framework.parsers.FormParser",
    ],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "UNAUTHENTICATED_USER": None,
}

# Site
SITE_BASE_URL = config("SITE_BASE_URL", default="https://example.com").rstrip("/")
SITE_NAME = config("SITE_NAME", default="Events Platform")
TWITTER_HANDLE = config("TWITTER_HANDLE", default="@EventsPlatform")

# Catalog
EVENTS_SEED_PATH = config("EVENTS_SEED_PATH", default=str(BASE_DIR / "events" / "data" / "events.json"))
TICKETS_SEED_PATH = config("TICKETS_SEED_PATH", default=str(BASE_DIR / "tickets" / "data" / "tickets.json"))
EVENTS_PAGE_SIZE = config("EVENTS_PAGE_SIZE", default=12, cast=int)
EVENTS_MAX_PAGE_SIZE = config("EVENTS_MAX_PAGE_SIZE", default=100, cast=int)
LISTING_PAGE_SIZE = config("LISTING_PAGE_SIZE", default=6, cast=int)
FEATURED_EVENTS_LIMIT = config("FEATURED_EVENTS_LIMIT", default=3, cast=int)

# Mock backend behaviour, off unless configured
SIMULATED_LATENCY_MS = config("SIMULATED_LATENCY_MS", default=0, cast=int)
BOOKING_FAILURE_RATE = config("BOOKING_FAILURE_RATE", default=0.0, cast=float)
