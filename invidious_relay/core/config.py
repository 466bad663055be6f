import os
from dotenv import load_dotenv

load_dotenv()

DEFAULT_INSTANCE = "https://lekker.gay"
DEFAULT_PORT = 3000

SEARCH_SOURCES = ("api", "html")


def _optional_float(value):
    if value is None or str(value).strip() == "":
        return None
    return float(value)


class Settings:
    """
    Runtime configuration for the relay.

    Values come from the environment (and a local .env file), and any of them
    can be overridden with keyword arguments, e.g.
    Settings(INVIDIOUS_INSTANCE="http://upstream.test").
    """

    def __init__(self, **overrides):
        # UPSTREAM
        self.INVIDIOUS_INSTANCE = overrides.get(
            "INVIDIOUS_INSTANCE", os.getenv("INVIDIOUS_INSTANCE") or DEFAULT_INSTANCE
        ).rstrip("/")
        self.SEARCH_SOURCE = overrides.get(
            "SEARCH_SOURCE", os.getenv("SEARCH_SOURCE", "api")
        ).strip().lower()
        # None = wait for the upstream as long as it takes
        self.REQUEST_TIMEOUT = _optional_float(
            overrides.get("REQUEST_TIMEOUT", os.getenv("REQUEST_TIMEOUT"))
        )

        # SERVER
        self.HOST = overrides.get("HOST", os.getenv("HOST", "0.0.0.0"))
        self.PORT = int(overrides.get("PORT", os.getenv("PORT") or DEFAULT_PORT))
        cors = overrides.get("CORS_ORIGINS", os.getenv("CORS_ORIGINS", "*"))
        if isinstance(cors, str):
            cors = [o.strip() for o in cors.split(",") if o.strip()]
        self.CORS_ORIGINS = cors or ["*"]

        # LOGGING
        self.LOG_LEVEL = overrides.get("LOG_LEVEL", os.getenv("LOG_LEVEL", "INFO")).upper()

        if self.SEARCH_SOURCE not in SEARCH_SOURCES:
            raise ValueError(
                f"SEARCH_SOURCE must be one of {SEARCH_SOURCES}, got {self.SEARCH_SOURCE!r}"
            )

    def __repr__(self):
        return (
            f"Settings(INVIDIOUS_INSTANCE={self.INVIDIOUS_INSTANCE!r}, "
            f"PORT={self.PORT}, SEARCH_SOURCE={self.SEARCH_SOURCE!r})"
        )


settings = Settings()
