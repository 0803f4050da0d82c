import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    # Logging
    LOG_DIR = os.getenv("LOG_DIR", "logs")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_TO_FILE = os.getenv("LOG_TO_FILE", "false").lower() in ("1", "true", "yes", "on")
    APP_LOG_FILENAME = os.getenv("APP_LOG_FILENAME", "resolver_app.log")
    APP_LOG_PATH = os.path.join(LOG_DIR, APP_LOG_FILENAME)
    TRACE_LOG_FILENAME = os.getenv("TRACE_LOG_FILENAME", "resolve_trace.log")
    TRACE_LOG_PATH = os.path.join(LOG_DIR, TRACE_LOG_FILENAME)

    # Service
    SERVICE_HOST = os.getenv("SERVICE_HOST", "127.0.0.1")
    APP_PORT = int(os.getenv("APP_PORT", os.getenv("PORT", "8000")))

    # Outbound fetch
    FETCH_TIMEOUT_SECONDS = float(os.getenv("FETCH_TIMEOUT_SECONDS", "8.0"))
    FETCH_MAX_REDIRECTS = int(os.getenv("FETCH_MAX_REDIRECTS", "3"))
    FETCH_USER_AGENT = os.getenv(
        "FETCH_USER_AGENT",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/124.0 Safari/537.36",
    )
    FETCH_ACCEPT_LANGUAGE = os.getenv("FETCH_ACCEPT_LANGUAGE", "en-US,en;q=0.9")

    # Shortlinks
    SHORTLINK_HOSTS = [
        h.strip().lower()
        for h in os.getenv("SHORTLINK_HOSTS", "goo.gl,maps.app.goo.gl").split(",")
        if h.strip()
    ]


settings = Settings()
