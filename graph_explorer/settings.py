"""Django settings for the graph explorer."""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("GRAPH_EXPLORER_SECRET_KEY", "graph-explorer-development-key")
DEBUG = os.environ.get("GRAPH_EXPLORER_DEBUG", "1") == "1"
ALLOWED_HOSTS = os.environ.get("GRAPH_EXPLORER_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",")

INSTALLED_APPS = [
    "graph_explorer.explorer",
]

MIDDLEWARE = [
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "graph_explorer.urls"

# Uploaded graph files are small text files
FILE_UPLOAD_MAX_MEMORY_SIZE = 2 * 1024 * 1024

USE_TZ = True

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "plain"},
    },
    "loggers": {
        name: {"handlers": ["console"], "level": os.environ.get("GRAPH_EXPLORER_LOG_LEVEL", "INFO")}
        for name in ("api", "core", "datasource_text", "visualizer_simple", "graph_explorer")
    },
}
