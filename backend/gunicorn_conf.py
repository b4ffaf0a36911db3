"""
gunicorn_conf.py — Gunicorn-Konfiguration für die Pager-API (FastAPI/Uvicorn)

Start:
    gunicorn -c gunicorn_conf.py pager.main:app

Kommentarübersicht
------------------
- Bind-Adresse & Port: Auf allen Interfaces, Port 8000
- Worker-Setup: UvicornWorker als Async-Server, Anzahl per ENV
- Timeouts: kurze Limits, der Pager rechnet nur im Speicher
- Keepalive: Verbindungsoffenhaltung für Performance
"""

import multiprocessing
import os

# Adresse & Port, auf denen Gunicorn lauscht
bind = os.environ.get("PAGER_BIND", "0.0.0.0:8000")

# Anzahl Worker-Prozesse (Default: 2 * CPU + 1)
workers = int(os.environ.get("PAGER_WORKERS", multiprocessing.cpu_count() * 2 + 1))

# Worker-Klasse: UvicornWorker für asynchrone FastAPI
worker_class = "uvicorn.workers.UvicornWorker"

timeout = 30
graceful_timeout = 10
keepalive = 5

# Logging über stdout, Level wie die App
loglevel = os.environ.get("LOG_LEVEL", "INFO").lower()
accesslog = "-"
errorlog = "-"
