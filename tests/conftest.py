# tests/conftest.py
"""Shared fixtures for invidious_relay tests."""

import json
from unittest.mock import patch

import pytest
import requests
from fastapi.testclient import TestClient

from invidious_relay.core.config import Settings
from invidious_relay.main import create_app
from invidious_relay.services.upstream import InvidiousClient

INSTANCE = "http://upstream.test"


def make_response(body, status=200, url=INSTANCE):
    """Real requests.Response carrying `body` (str, bytes, or JSON-able object)."""
    if not isinstance(body, (str, bytes)):
        body = json.dumps(body)
    if isinstance(body, str):
        body = body.encode("utf-8")

    resp = requests.models.Response()
    resp.status_code = status
    resp._content = body
    resp.url = url
    resp.encoding = "utf-8"
    return resp


POPULAR_HTML = """
<html><body>
<div class="pure-g loop">
  <div class="pure-u-1 pure-u-md-1-4">
    <div class="h-box">
      <a href="/watch?v=abc123"><img class="thumbnail" src="/vi/abc123/mqdefault.jpg"></a>
      <h3><a href="/watch?v=abc123">  First video  </a></h3>
      <p class="channel-name">Channel One</p>
      <p class="stat">1.2M views</p>
      <p class="stat">3 days ago</p>
    </div>
  </div>
  <div class="pure-u-1 pure-u-md-1-4">
    <div class="h-box"><p>Sponsored block without a link</p></div>
  </div>
  <div class="pure-u-1 pure-u-md-1-4">
    <div class="h-box"><h3><a href="/channel/UC123">A channel card</a></h3></div>
  </div>
  <div class="pure-u-1 pure-u-md-1-4">
    <div class="h-box">
      <h3><a href="https://mirror.test/watch?v=def456&amp;t=30">Second video</a></h3>
    </div>
  </div>
</div>
</body></html>
"""

WATCH_HTML = """
<html><body>
<h1 class="video-title">  Relay Test Video  </h1>
<a class="channel-name" href="/channel/UC1">The Author</a>
<p class="stat">4,321 views</p>
<p class="stat">2 weeks ago</p>
<div id="description">A description of the video.</div>
<a class="pure-button pure-button-primary" href="/latest_version?id=abc123&amp;itag=22">Download mp4 720p</a>
<a class="pure-button pure-button-primary" href="https://cdn.test/abc123.webm">Download webm audio</a>
<a class="pure-button pure-button-primary" href="/subscribe">Subscribe</a>
<a class="pure-button pure-button-primary">Download orphan</a>
<a class="pure-button" href="/latest_version?id=abc123&amp;itag=18">Download mp4 360p</a>
</body></html>
"""

COMMENTS_HTML = """
<html><body>
<div class="comment-wrapper">
  <div class="comment-header">
    <a class="comment-author">@alice</a>
    <span class="time">1 day ago</span>
    <span class="likes">12</span>
  </div>
  <div class="comment-content"> Great video! </div>
</div>
<div class="comment-wrapper">
  <div class="comment-content">No header here</div>
</div>
</body></html>
"""

SEARCH_JSON = [
    {
        "type": "video",
        "title": "Lofi beats",
        "videoId": "lofi001",
        "author": "Lofi Girl",
        "viewCount": 1234567,
        "publishedText": "3 weeks ago",
        "videoThumbnails": [{"quality": "maxres", "url": "/vi/lofi001/maxres.jpg"}],
    },
    {"type": "channel", "author": "Lofi Girl", "authorId": "UC1"},
    {"type": "playlist", "title": "Lofi mix", "playlistId": "PL1"},
    {"type": "video", "title": "Broken entry"},
    {
        "type": "video",
        "title": "Quiet lofi",
        "videoId": "lofi002",
        "author": "Someone",
        "viewCount": 0,
        "publishedText": "1 year ago",
        "thumbnail": "https://img.test/lofi002.jpg",
    },
]


@pytest.fixture
def settings():
    return Settings(INVIDIOUS_INSTANCE=INSTANCE, PORT=8080, SEARCH_SOURCE="api")


@pytest.fixture
def client(settings):
    """InvidiousClient pointed at the fake upstream."""
    return InvidiousClient(settings)


@pytest.fixture
def mock_get():
    """Patched requests.get used by the upstream client."""
    with patch("invidious_relay.services.upstream.requests.get") as mock:
        yield mock


@pytest.fixture
def api(settings, client):
    """TestClient around an app wired to the fake upstream."""
    app = create_app(settings=settings, client=client)
    with TestClient(app) as test_client:
        yield test_client
