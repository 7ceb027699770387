"""
Pydantic models for API request/response schemas
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from reelsmith.config import DEFAULT_VOICE


# === Request Models ===

class CreateVideoRequest(BaseModel):
    """Request to turn a script into a video project"""
    script: str
    style_id: Optional[str] = None
    image_model: Optional[str] = None
    voice: str = DEFAULT_VOICE


class BreakScriptRequest(BaseModel):
    """Request to split a script into narration chunks"""
    script: str


class ImagePromptsRequest(BaseModel):
    """Request to write one visual prompt per chunk"""
    chunks: List[str]
    style_id: Optional[str] = None
    previous_prompts: Optional[List[str]] = None


# === Response Models ===

class CreateVideoResponse(BaseModel):
    success: bool = True
    project_id: str
    status: str
    message: str


class BreakScriptResponse(BaseModel):
    chunks: List[str]


class ImagePromptsResponse(BaseModel):
    prompts: List[str]


class WordModel(BaseModel):
    text: str
    start: float
    end: float


class WordBatchModel(BaseModel):
    text: str
    start: float
    end: float
    words: List[WordModel] = Field(default_factory=list)


class SegmentResponse(BaseModel):
    id: str
    order: int
    text: str
    image_prompt: str
    image_url: Optional[str] = None
    audio_url: Optional[str] = None
    duration: float
    word_timings: Optional[List[WordBatchModel]] = None


class TimelineEntryModel(BaseModel):
    segment_id: str
    order: int
    from_frame: int
    duration_in_frames: int


class ProjectResponse(BaseModel):
    """Project resource consumed by polling clients"""
    id: str
    status: str
    title: str
    duration: float
    total_frames: int
    created_at: str
    updated_at: str
    segments: List[SegmentResponse] = Field(default_factory=list)
    timeline: List[TimelineEntryModel] = Field(default_factory=list)


class CaptionWordModel(BaseModel):
    text: str
    is_active: bool
    is_completed: bool


class CaptionFrameResponse(BaseModel):
    segment_order: int
    time: float
    frame: Optional[int] = None
    display_text: str
    words: List[CaptionWordModel]


class SubtitlesResponse(BaseModel):
    """Project-wide subtitle lines on one continuous timeline"""
    project_id: str
    duration: float
    lines: List[WordModel] = Field(default_factory=list)


class RegenerateImageRequest(BaseModel):
    image_prompt: Optional[str] = None
    style_id: Optional[str] = None
    image_model: Optional[str] = None


class RegenerateAudioRequest(BaseModel):
    text: Optional[str] = None
    voice: str = DEFAULT_VOICE
