import logging
from urllib.parse import quote

from invidious_relay.core.config import Settings
from invidious_relay.extractors import (
    parse_comments,
    parse_search_results,
    parse_video_list,
    parse_video_page,
)
from invidious_relay.services.upstream import InvidiousClient

logger = logging.getLogger(__name__)

POPULAR_PATH = "/feed/popular"
SEARCH_PAGE_PATH = "/search"
SEARCH_API_PATH = "/api/v1/search"
WATCH_PATH = "/watch"
COMMENTS_PATH = "/comments"


class VideoService:
    """
    One method per relay operation: fetch once, extract, return DTOs.
    Errors from the client or the extractors propagate to the caller.
    """

    def __init__(self, client: InvidiousClient, settings: Settings):
        self.client = client
        self.search_source = settings.SEARCH_SOURCE

    def popular(self):
        html = self.client.get_html(POPULAR_PATH)
        videos = parse_video_list(html, self.client)
        logger.info(f"📈 Popular feed: {len(videos)} videos")
        return videos

    def search(self, query: str):
        if self.search_source == "html":
            html = self.client.get_html(SEARCH_PAGE_PATH, params={"q": query})
            results = parse_video_list(html, self.client)
        else:
            data = self.client.get_json(SEARCH_API_PATH, params={"q": query})
            results = parse_search_results(data, self.client)

        logger.info(f"🔎 Search '{query[:40]}' via {self.search_source}: {len(results)} videos")
        return results

    def watch_url(self, video_id: str) -> str:
        return self.client.absolute_url(f"{WATCH_PATH}?v={quote(video_id, safe='')}")

    def video(self, video_id: str):
        watch_url = self.watch_url(video_id)
        html = self.client.get_html(watch_url)
        detail = parse_video_page(html, self.client, watch_url)
        logger.info(f"🎬 Video {video_id}: {len(detail.formats)} download formats")
        return detail

    def comments(self, video_id: str):
        html = self.client.get_html(f"{COMMENTS_PATH}/{quote(video_id, safe='')}")
        comments = parse_comments(html)
        logger.info(f"💬 Video {video_id}: {len(comments)} comments")
        return comments
