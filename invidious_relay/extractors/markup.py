"""
invidious_relay/extractors/markup.py

Scrapes Invidious HTML pages with BeautifulSoup CSS selectors.

Rules shared by every parser:
  - a missing element becomes None, never an exception
  - a list item without a video id is dropped, siblings are unaffected
"""

import logging
from urllib.parse import urlparse, parse_qs
from bs4 import BeautifulSoup

from invidious_relay.schemas.video import Comment, VideoDetail, VideoFormat, VideoSummary

logger = logging.getLogger(__name__)

# ---------------- SELECTORS ----------------

VIDEO_ITEM = ".pure-g.loop > .pure-u-1"
VIDEO_LINK = "h3 a"
THUMBNAIL = "img"
CHANNEL_NAME = ".channel-name"
VIEWS_STAT = '.stat:-soup-contains("views")'
UPLOADED_STAT = '.stat:-soup-contains("ago")'

VIDEO_TITLE = ".video-title"
DESCRIPTION = "#description"
DOWNLOAD_BUTTON = "a.pure-button.pure-button-primary"
DOWNLOAD_LABEL = "Download"

COMMENT_ITEM = ".comment-wrapper"
COMMENT_AUTHOR = ".comment-author"
COMMENT_CONTENT = ".comment-content"
COMMENT_TIME = ".comment-header .time"
COMMENT_LIKES = ".comment-header .likes"


# ---------------- HELPERS ----------------

def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def get_text(node, selector: str):
    """Stripped text of the first element matching `selector`, or None."""
    el = node.select_one(selector)
    return el.get_text().strip() if el is not None else None


def get_attr(node, selector: str, attr: str):
    """Attribute of the first element matching `selector`, or None."""
    el = node.select_one(selector)
    return el.get(attr) if el is not None else None


def video_id_from_href(href):
    """'/watch?v=abc123&t=10' -> 'abc123'"""
    if not href:
        return None
    values = parse_qs(urlparse(href).query).get("v")
    return values[0] if values else None


# ---------------- PARSERS ----------------

def parse_video_list(html: str, client) -> list[VideoSummary]:
    """Video cards from /feed/popular or the /search results page."""
    soup = _soup(html)
    videos = []
    dropped = 0

    for item in soup.select(VIDEO_ITEM):
        href = get_attr(item, VIDEO_LINK, "href")
        video_id = video_id_from_href(href)
        if not video_id:
            dropped += 1
            continue

        videos.append(
            VideoSummary(
                title=get_text(item, VIDEO_LINK),
                video_id=video_id,
                thumbnail=client.absolute_url(get_attr(item, THUMBNAIL, "src")),
                author=get_text(item, CHANNEL_NAME),
                views=get_text(item, VIEWS_STAT),
                uploaded_at=get_text(item, UPLOADED_STAT),
                url=client.absolute_url(href),
            )
        )

    if dropped:
        logger.debug(f"Skipped {dropped} cards without a video id")

    return videos


def parse_video_page(html: str, client, watch_url: str) -> VideoDetail:
    """Metadata and download links from a /watch page."""
    soup = _soup(html)

    formats = []
    for button in soup.select(DOWNLOAD_BUTTON):
        href = button.get("href")
        text = button.get_text().strip()
        if not href or DOWNLOAD_LABEL not in text:
            continue

        label = text.replace(f"{DOWNLOAD_LABEL} ", "", 1).strip()
        if not label:
            continue

        formats.append(VideoFormat(format=label, url=client.absolute_url(href)))

    return VideoDetail(
        title=get_text(soup, VIDEO_TITLE),
        author=get_text(soup, CHANNEL_NAME),
        views=get_text(soup, VIEWS_STAT),
        uploaded_at=get_text(soup, UPLOADED_STAT),
        description=get_text(soup, DESCRIPTION),
        formats=formats,
        watch_url=watch_url,
    )


def parse_comments(html: str) -> list[Comment]:
    soup = _soup(html)
    return [
        Comment(
            author=get_text(item, COMMENT_AUTHOR),
            text=get_text(item, COMMENT_CONTENT),
            time=get_text(item, COMMENT_TIME),
            likes=get_text(item, COMMENT_LIKES),
        )
        for item in soup.select(COMMENT_ITEM)
    ]
