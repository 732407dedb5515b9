import os

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "smartwaste-insecure-dev-key")
DEBUG = os.getenv("DJANGO_DEBUG", "false").lower() in {"1", "true", "yes"}
ALLOWED_HOSTS = [host.strip() for host in os.getenv("DJANGO_ALLOWED_HOSTS", "*").split(",") if host.strip()]

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "bins",
]

MIDDLEWARE = [
    "bins.middleware.HealthCheckMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "bins.middleware.ApiExceptionMiddleware",
]

ROOT_URLCONF = "smartwaste.urls"
WSGI_APPLICATION = "smartwaste.wsgi.application"

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

# Database
# SQLite by default; PostgreSQL gets a bounded psycopg connection pool so that
# requests beyond the pool size wait up to POOL_TIMEOUT seconds, then fail.
DB_ENGINE = os.getenv("SMARTWASTE_DB_ENGINE", "sqlite").lower()

if DB_ENGINE == "postgresql":
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.postgresql",
            "NAME": os.getenv("SMARTWASTE_DB_NAME", "smart_waste"),
            "USER": os.getenv("SMARTWASTE_DB_USER", "postgres"),
            "PASSWORD": os.getenv("SMARTWASTE_DB_PASSWORD", ""),
            "HOST": os.getenv("SMARTWASTE_DB_HOST", "localhost"),
            "PORT": os.getenv("SMARTWASTE_DB_PORT", "5432"),
            "OPTIONS": {
                "pool": {
                    "min_size": int(os.getenv("SMARTWASTE_DB_POOL_MIN", "2")),
                    "max_size": int(os.getenv("SMARTWASTE_DB_POOL_MAX", "10")),
                    "timeout": float(os.getenv("SMARTWASTE_DB_POOL_TIMEOUT", "30")),
                },
            },
        }
    }
elif DB_ENGINE == "sqlite":
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": os.getenv("SMARTWASTE_DB_NAME", os.path.join(BASE_DIR, "smart_waste.sqlite3")),
            "OPTIONS": {
                "timeout": float(os.getenv("SMARTWASTE_DB_TIMEOUT", "20")),
                # Writers take the lock at BEGIN and wait for it instead of failing on upgrade.
                "transaction_mode": "IMMEDIATE",
            },
            # A file, not shared-cache memory, so threads in tests wait on the busy timeout.
            "TEST": {"NAME": os.path.join(BASE_DIR, "test_smart_waste.sqlite3")},
        }
    }
else:
    msg = f"Unsupported SMARTWASTE_DB_ENGINE {DB_ENGINE!r}; expected 'sqlite' or 'postgresql'."
    raise ValueError(msg)

DEFAULT_AUTO_FIELD = "django.db.models.AutoField"

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

STATIC_URL = "/static/"
STATIC_ROOT = os.path.join(BASE_DIR, "staticfiles")

HEALTH_CHECK_PATH = os.getenv("HEALTH_CHECK_PATH", "/healthz/")

LOG_LEVEL = os.getenv("SMARTWASTE_LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "bins": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": False,
        },
        "django.request": {
            "handlers": ["console"],
            "level": "ERROR",
            "propagate": False,
        },
    },
}
