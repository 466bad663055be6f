"""
invidious_relay/extractors/structured.py

Maps the Invidious JSON API (/api/v1/search) onto the relay's DTOs.
Only "video" entries are relayed; playlists, channels and anything
unknown are filtered out. A malformed entry is skipped without
affecting its siblings.
"""

import logging
from pydantic import ValidationError

from invidious_relay.exceptions import ExtractionError
from invidious_relay.schemas.video import VideoSummary

logger = logging.getLogger(__name__)


def format_views(view_count):
    """12345 -> '12,345 views'. Zero or missing counts give None."""
    if isinstance(view_count, bool) or not isinstance(view_count, (int, float)):
        return None
    if view_count <= 0:
        return None
    return f"{int(view_count):,} views"


def pick_thumbnail(item: dict):
    """First videoThumbnails url, else the flat thumbnail field. Non-strings give None."""
    thumbs = item.get("videoThumbnails")
    url = None
    if isinstance(thumbs, list) and thumbs and isinstance(thumbs[0], dict):
        url = thumbs[0].get("url")
    if not url:
        url = item.get("thumbnail")
    return url if isinstance(url, str) else None


def parse_search_results(items, client) -> list[VideoSummary]:
    if not isinstance(items, list):
        raise ExtractionError(f"Expected a list of search results, got {type(items).__name__}")

    results = []
    for item in items:
        if not isinstance(item, dict) or item.get("type") != "video":
            continue

        video_id = item.get("videoId")
        if not video_id:
            continue

        try:
            results.append(
                VideoSummary(
                    title=item.get("title"),
                    video_id=video_id,
                    thumbnail=client.absolute_url(pick_thumbnail(item)),
                    author=item.get("author"),
                    views=format_views(item.get("viewCount")),
                    uploaded_at=item.get("publishedText"),
                    url=client.absolute_url(f"/watch?v={video_id}"),
                )
            )
        except ValidationError as e:
            logger.warning(f"⚠️ Skipping malformed search entry {video_id!r}: {e}")
            continue

    return results
