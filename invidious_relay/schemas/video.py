from pydantic import BaseModel, Field, computed_field
from typing import Optional, List


class RelaySchema(BaseModel):
    # Wire format is camelCase, Python side stays snake_case
    class Config:
        populate_by_name = True


# --- LISTINGS (popular / search) ---
class VideoSummary(RelaySchema):
    title: Optional[str] = None
    video_id: str = Field(alias="videoId")
    thumbnail: Optional[str] = None
    author: Optional[str] = None
    views: Optional[str] = None
    uploaded_at: Optional[str] = Field(default=None, alias="uploadedAt")
    url: Optional[str] = None


# --- VIDEO DETAIL ---
class VideoFormat(RelaySchema):
    format: str
    url: str


class VideoDetail(RelaySchema):
    title: Optional[str] = None
    author: Optional[str] = None
    views: Optional[str] = None
    uploaded_at: Optional[str] = Field(default=None, alias="uploadedAt")
    description: Optional[str] = None
    formats: List[VideoFormat] = Field(default_factory=list)
    watch_url: str = Field(alias="sourceWatchUrl")

    # Older clients read the watch URL under this name
    @computed_field(alias="invidiousWatchUrl")
    @property
    def invidious_watch_url(self) -> str:
        return self.watch_url


# --- COMMENTS ---
class Comment(RelaySchema):
    author: Optional[str] = None
    text: Optional[str] = None
    time: Optional[str] = None
    likes: Optional[str] = None


# --- ERRORS ---
class ErrorResponse(BaseModel):
    error: str
