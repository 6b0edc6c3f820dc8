import os

from dotenv import load_dotenv

load_dotenv()

# env
LOG_LEVEL = (os.getenv("LOG_LEVEL") or "INFO").upper()
STRIKERS_TOKEN = os.getenv("STRIKERS_TOKEN") or ""
STRIKERS_REFRESH = os.getenv("STRIKERS_REFRESH") or ""

_timeout_raw = os.getenv("HTTP_TIMEOUT")
if _timeout_raw:
    try:
        HTTP_TIMEOUT = float(_timeout_raw.split()[0])
    except ValueError:
        HTTP_TIMEOUT = 15.0
else:
    HTTP_TIMEOUT = 15.0

# endpoints
BASE_URL = (
    os.getenv("STRIKERS_BASE_URL")
    or "https://prometheus-proxy.odysseyinteractive.gg/api"
).rstrip("/")

# limits
MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 10000
