# vizhelper/config.py
import os
from dotenv import load_dotenv, find_dotenv

load_dotenv(find_dotenv(usecwd=True))

# metrics API (consumed, not served, by this app)
BASE_URL = os.environ.get("VIZHELPER_BASE_URL", "http://127.0.0.1:8000")

# local chart UI
HOST = os.environ.get("VIZHELPER_HOST", "127.0.0.1")
PORT = int(os.environ.get("VIZHELPER_PORT", "8050"))

# CSV run log of every completed load; unset disables it
FETCH_LOG = os.environ.get("VIZHELPER_FETCH_LOG") or None

LOG_LEVEL = os.environ.get("VIZHELPER_LOG_LEVEL", "INFO").upper()
