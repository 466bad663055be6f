"""
invidious_relay/services/upstream.py

The only place that talks to the Invidious instance.
Every relay request performs exactly ONE call through this client:
  - no retries
  - no caching
  - timeout only when REQUEST_TIMEOUT is configured
"""

import logging
import requests

from invidious_relay.core.config import Settings
from invidious_relay.exceptions import UpstreamError

logger = logging.getLogger(__name__)

HEADERS = {
    "User-Agent": "Mozilla/5.0"
}

# How much of a failing upstream body ends up in the logs
BODY_EXCERPT_CHARS = 500


class InvidiousClient:
    def __init__(self, settings: Settings):
        self.instance = settings.INVIDIOUS_INSTANCE
        self.timeout = settings.REQUEST_TIMEOUT

    # ------------------------------------------------------------------
    # URL HELPERS
    # ------------------------------------------------------------------

    def absolute_url(self, path):
        """
        Turns an Invidious-relative path into an absolute URL.

        Already-absolute URLs are returned untouched, and exactly one slash
        separates the instance origin from a relative path.
        """
        if not path:
            return None
        if path.startswith("http://") or path.startswith("https://"):
            return path
        return f"{self.instance}{'' if path.startswith('/') else '/'}{path}"

    # ------------------------------------------------------------------
    # FETCHING
    # ------------------------------------------------------------------

    def get_html(self, path: str, params: dict | None = None) -> str:
        return self._get(path, params).text

    def get_json(self, path: str, params: dict | None = None):
        resp = self._get(path, params)
        try:
            return resp.json()
        except ValueError as e:
            raise UpstreamError(
                f"Invalid JSON from {resp.url}: {e}",
                status_code=resp.status_code,
                body=resp.text[:BODY_EXCERPT_CHARS],
            ) from e

    def _get(self, path: str, params: dict | None) -> requests.Response:
        url = self.absolute_url(path)
        logger.debug(f"➡️ GET {url} params={params}")

        try:
            resp = requests.get(url, params=params, headers=HEADERS, timeout=self.timeout)
            resp.raise_for_status()
            return resp

        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            body = e.response.text[:BODY_EXCERPT_CHARS] if e.response is not None else None
            raise UpstreamError(f"Upstream returned {status} for {url}", status, body) from e

        except requests.exceptions.Timeout as e:
            raise UpstreamError(f"Timed out after {self.timeout}s waiting for {url}") from e

        except requests.exceptions.RequestException as e:
            raise UpstreamError(f"Network error for {url}: {e}") from e
