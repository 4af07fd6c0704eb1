# backend/gunicorn_conf.py

# Gunicorn config file: gunicorn -c gunicorn_conf.py regflow.main:app
#
# Sessions live in process memory, so each worker owns its own flows. Run a
# single worker unless requests are pinned to workers upstream.

import os

bind = os.getenv("BIND", "0.0.0.0:8000")
workers = int(os.getenv("WEB_CONCURRENCY", "1"))
worker_class = "uvicorn.workers.UvicornWorker"

# Settings for running behind a reverse proxy like Nginx
forwarded_allow_ips = "*"

# --- Logging ---
accesslog = "-"
errorlog = "-"
loglevel = "info"
