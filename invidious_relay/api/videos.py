import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from typing import List, Optional

from invidious_relay.exceptions import UpstreamError
from invidious_relay.schemas.video import Comment, ErrorResponse, VideoDetail, VideoSummary
from invidious_relay.services.video_service import VideoService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Videos"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}

MISSING_QUERY = 'Query parameter "q" is required.'
MISSING_VIDEO_ID = "Video ID is required."


def get_video_service(request: Request) -> VideoService:
    return VideoService(request.app.state.client, request.app.state.settings)


def _fail(message: str, e: Exception):
    """Logs the real cause, answers the client with a generic 500."""
    if isinstance(e, UpstreamError):
        logger.error(f"❌ {message}: {e} [status={e.status_code}]")
        if e.body:
            logger.error(f"   Upstream response body: {e.body}")
    else:
        logger.exception(f"❌ {message}: {e}")
    return HTTPException(status_code=500, detail=message)


def _require_video_id(video_id: Optional[str]) -> str:
    if not video_id or not video_id.strip():
        raise HTTPException(status_code=400, detail=MISSING_VIDEO_ID)
    return video_id.strip()


# ---------------------------------------------------------
# 1. POPULAR VIDEOS
# ---------------------------------------------------------
@router.get("/popular", response_model=List[VideoSummary], responses=ERROR_RESPONSES)
def get_popular(service: VideoService = Depends(get_video_service)):
    try:
        return service.popular()
    except Exception as e:
        raise _fail("Failed to fetch popular videos", e)


# ---------------------------------------------------------
# 2. SEARCH
# ---------------------------------------------------------
@router.get("/search", response_model=List[VideoSummary], responses=ERROR_RESPONSES)
def search_videos(q: Optional[str] = None, service: VideoService = Depends(get_video_service)):
    if not q:
        raise HTTPException(status_code=400, detail=MISSING_QUERY)

    try:
        return service.search(q)
    except Exception as e:
        raise _fail("Failed to fetch search results", e)


# ---------------------------------------------------------
# 3. VIDEO DETAIL (with download formats)
# ---------------------------------------------------------
@router.get("/video", include_in_schema=False)
@router.get("/video/", include_in_schema=False)
def get_video_without_id():
    raise HTTPException(status_code=400, detail=MISSING_VIDEO_ID)


@router.get("/video/{video_id}", response_model=VideoDetail, responses=ERROR_RESPONSES)
def get_video(video_id: str, service: VideoService = Depends(get_video_service)):
    video_id = _require_video_id(video_id)

    try:
        return service.video(video_id)
    except Exception as e:
        raise _fail("Failed to fetch video information", e)


# ---------------------------------------------------------
# 4. COMMENTS
# ---------------------------------------------------------
@router.get("/comments", include_in_schema=False)
@router.get("/comments/", include_in_schema=False)
def get_comments_without_id():
    raise HTTPException(status_code=400, detail=MISSING_VIDEO_ID)


@router.get("/comments/{video_id}", response_model=List[Comment], responses=ERROR_RESPONSES)
def get_comments(video_id: str, service: VideoService = Depends(get_video_service)):
    video_id = _require_video_id(video_id)

    try:
        return service.comments(video_id)
    except Exception as e:
        raise _fail("Failed to fetch comments", e)
