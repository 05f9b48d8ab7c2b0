"""
Gunicorn configuration for production deployment.

    gunicorn -c gunicorn.conf.py nexthire.main:app
"""
import os

wsgi_app = "nexthire.main:app"
proc_name = "nexthire_api"

bind = os.getenv("GUNICORN_BIND", f"0.0.0.0:{os.getenv('PORT', '3000')}")

# Each worker opens its own MongoDB pool in the app lifespan
workers = int(os.getenv("GUNICORN_WORKERS", 2))
worker_class = "uvicorn.workers.UvicornWorker"

# Restart each worker after roughly this many requests
max_requests = 1000
max_requests_jitter = 100

timeout = 30
graceful_timeout = 30
keepalive = 5

# App logs go through structlog; gunicorn only writes its own access/error lines
accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()


def on_starting(server):
    server.log.info("Starting NextHire API on %s with %s workers", bind, workers)
