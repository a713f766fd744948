"""
Django settings for the fieldops project.
"""

# django-environ reads values from .env
import environ
from pathlib import Path
import os

BASE_DIR = Path(__file__).resolve().parent.parent


# env with defaults; secrets (SECRET_KEY, POSTGRES_PASSWORD) are expected in .env for production.
env = environ.Env(
    DEBUG=(bool, False),
    DATABASE=(str, "sqlite"),
    POSTGRES_PORT=(int, 5432),
    LOG_LEVEL=(str, "INFO"),
    SECTION_PROPAGATES=(bool, True),
)

# load .env (missing file is fine for tests and local runs)
environ.Env.read_env(os.path.join(BASE_DIR, ".env"))

# ========== Debug ==========
DEBUG = env("DEBUG")
SECRET_KEY = env("SECRET_KEY", default="django-insecure-fieldops-dev-key")
ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", default=["127.0.0.1", "localhost"])

# ========== Database ==========
# DATABASE=postgres switches to PostgreSQL, anything else keeps SQLite.
if env("DATABASE") == "postgres":
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.postgresql",
            "NAME": env("POSTGRES_DB"),
            "USER": env("POSTGRES_USER"),
            "PASSWORD": env("POSTGRES_PASSWORD"),
            "HOST": env("POSTGRES_HOST", default="localhost"),
            "PORT": env("POSTGRES_PORT"),
        }
    }
else:
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": env("SQLITE_STORAGE", default=str(BASE_DIR / "database.sqlite3")),
        }
    }


# -------------------------------------------------
# Applications
#  base must come first: it defines AUTH_USER_MODEL
# -------------------------------------------------
INSTALLED_APPS = [
    # Django
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",

    # Project apps
    "base.apps.BaseConfig",
    "territory.apps.TerritoryConfig",
    "access.apps.AccessConfig",
]

# -------------------------------------------------
# Middleware
# -------------------------------------------------
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

# -------------------------------------------------
# URLs / WSGI
# -------------------------------------------------
ROOT_URLCONF = "fieldops.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "fieldops.wsgi.application"


# -------------------------------------------------
# Auth
# -------------------------------------------------
AUTH_USER_MODEL = "base.User"

AUTH_PASSWORD_VALIDATORS = [
    {"NAME": "django.contrib.auth.password_validation.UserAttributeSimilarityValidator"},
    {"NAME": "django.contrib.auth.password_validation.MinimumLengthValidator"},
    {"NAME": "django.contrib.auth.password_validation.CommonPasswordValidator"},
    {"NAME": "django.contrib.auth.password_validation.NumericPasswordValidator"},
]

# -------------------------------------------------
# Entitlements
# -------------------------------------------------
# Roles that bypass hierarchical filtering entirely.
# jefe_campana is left out: campaign managers see the area their grants
# cover. Add it to restore the campaign-wide BI view.
FIELDOPS_UNRESTRICTED_ROLES = env.list("UNRESTRICTED_ROLES", default=["admin"])

# Whether Section grants cascade into the Localities that reference them.
FIELDOPS_SECTION_PROPAGATES = env("SECTION_PROPAGATES")

# Roles whose grants count as "assigned" in the coverage metrics.
FIELDOPS_SCHOOL_ASSIGNMENT_ROLES = env.list("SCHOOL_ASSIGNMENT_ROLES", default=["fiscal_general"])
FIELDOPS_TABLE_ASSIGNMENT_ROLES = env.list("TABLE_ASSIGNMENT_ROLES", default=["fiscal_mesa"])

# -------------------------------------------------
# Logging
# -------------------------------------------------
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "root": {"handlers": ["console"], "level": env("LOG_LEVEL")},
}

# -------------------------------------------------
# I18N / TZ
# -------------------------------------------------
LANGUAGE_CODE = "es-ar"
TIME_ZONE = "America/Argentina/Buenos_Aires"
USE_I18N = True
USE_TZ = True

# -------------------------------------------------
# Static
# -------------------------------------------------
STATIC_URL = "static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"
