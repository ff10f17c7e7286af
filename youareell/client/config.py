"""Client configuration values."""

DEFAULT_BASE_URL = "http://zipcode.rocks:8085"
REQUEST_TIMEOUT = 10
WATCH_INTERVAL_SECONDS = 1.0
PROMPT = "> "
