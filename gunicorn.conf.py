import multiprocessing  # For CPU core count to size workers dynamically
import os  # For reading WEB_CONCURRENCY / GUNICORN_* overrides

wsgi_app = "smartwaste.wsgi:application"  # Django WSGI entry point
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "smartwaste.settings")  # Ensure Django settings load under gunicorn
# Allow explicit override via WEB_CONCURRENCY, else use heuristic (2 x cores) + 1
workers = int(os.getenv("WEB_CONCURRENCY", multiprocessing.cpu_count() * 2 + 1))
# Each thread holds at most one DB connection; keep workers * threads within the DB pool size
threads = int(os.getenv("GUNICORN_THREADS", "4"))
worker_class = "gthread"  # Threaded worker class
bind = os.getenv("GUNICORN_BIND", "0.0.0.0:3000")  # Same port the dashboard expects
accesslog = "-"  # HTTP access logs to stdout
errorlog = "-"  # Error logs to stderr
loglevel = os.getenv("SMARTWASTE_LOG_LEVEL", "info").lower()
timeout = int(os.getenv("GUNICORN_TIMEOUT", "60"))  # Restart worker if a request runs longer than this
keepalive = 5  # Seconds to hold an idle HTTP connection open for reuse
