"""
Project routes: create a video from a script, poll project status, resolve
captions for preview playback, and regenerate the media of one segment.
"""

from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Depends, Header, HTTPException, Query

from ..core import (
    AudioGenerationError,
    InvalidScriptError,
    ProjectNotFoundError,
    ProviderError,
    StorageError,
    get_logger,
)
from ..dependencies import (
    get_caption_use_case,
    get_frame_caption_use_case,
    get_project_use_case,
    get_segment_regeneration_use_case,
    get_subtitles_use_case,
    get_video_creation_use_case,
)
from ..models import (
    CaptionFrameResponse,
    CreateVideoRequest,
    CreateVideoResponse,
    ProjectResponse,
    RegenerateAudioRequest,
    RegenerateImageRequest,
    SegmentResponse,
    SubtitlesResponse,
)
from ..services.use_cases import (
    CaptionRequest,
    FrameCaptionRequest,
    FrameCaptionUseCase,
    GetProjectRequest,
    GetProjectUseCase,
    RegenerateAudioCommand,
    RegenerateImageCommand,
    RegenerateSegmentMediaUseCase,
    ResolveCaptionUseCase,
    SubtitlesRequest,
    SubtitlesUseCase,
    VideoCreationUseCase,
)

router = APIRouter(prefix="/api", tags=["projects"])
logger = get_logger(__name__, component="projects_routes")


@router.post("/create-video", response_model=CreateVideoResponse)
async def create_video(
    request: CreateVideoRequest,
    background_tasks: BackgroundTasks,
    x_user_id: str = Header(default="anonymous"),
    use_case: VideoCreationUseCase = Depends(get_video_creation_use_case),
):
    """Create a project and start generation; poll the project for progress"""
    try:
        return use_case.start(request, background_tasks, owner_id=x_user_id)
    except InvalidScriptError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/projects/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: str,
    x_user_id: str = Header(default="anonymous"),
    use_case: GetProjectUseCase = Depends(get_project_use_case),
):
    try:
        return await use_case.execute(GetProjectRequest(project_id=project_id, owner_id=x_user_id))
    except ProjectNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get(
    "/projects/{project_id}/segments/{order}/caption",
    response_model=CaptionFrameResponse,
)
async def get_caption(
    project_id: str,
    order: int,
    t: float = Query(..., ge=0, description="Segment-relative time in seconds"),
    x_user_id: str = Header(default="anonymous"),
    use_case: ResolveCaptionUseCase = Depends(get_caption_use_case),
):
    try:
        return await use_case.execute(
            CaptionRequest(project_id=project_id, owner_id=x_user_id, segment_order=order, time=t)
        )
    except ProjectNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/projects/{project_id}/caption", response_model=CaptionFrameResponse)
async def get_frame_caption(
    project_id: str,
    frame: int = Query(..., ge=0, description="Absolute frame of the whole video"),
    x_user_id: str = Header(default="anonymous"),
    use_case: FrameCaptionUseCase = Depends(get_frame_caption_use_case),
):
    try:
        return await use_case.execute(
            FrameCaptionRequest(project_id=project_id, owner_id=x_user_id, frame=frame)
        )
    except ProjectNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/projects/{project_id}/subtitles", response_model=SubtitlesResponse)
async def get_subtitles(
    project_id: str,
    words_per_line: int = Query(8, ge=1),
    start: Optional[float] = Query(None, ge=0),
    end: Optional[float] = Query(None, ge=0),
    x_user_id: str = Header(default="anonymous"),
    use_case: SubtitlesUseCase = Depends(get_subtitles_use_case),
):
    try:
        return await use_case.execute(
            SubtitlesRequest(
                project_id=project_id,
                owner_id=x_user_id,
                words_per_line=words_per_line,
                start=start,
                end=end,
            )
        )
    except ProjectNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post(
    "/projects/{project_id}/segments/{segment_id}/regenerate-image",
    response_model=SegmentResponse,
)
async def regenerate_image(
    project_id: str,
    segment_id: str,
    request: RegenerateImageRequest,
    x_user_id: str = Header(default="anonymous"),
    use_case: RegenerateSegmentMediaUseCase = Depends(get_segment_regeneration_use_case),
):
    try:
        return await use_case.regenerate_image(
            RegenerateImageCommand(
                project_id=project_id,
                owner_id=x_user_id,
                segment_id=segment_id,
                image_prompt=request.image_prompt,
                style_id=request.style_id,
                image_model=request.image_model,
            )
        )
    except ProjectNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ProviderError as e:
        logger.warning(f"Image regeneration failed: {e}", extra={"segment_id": segment_id})
        raise HTTPException(status_code=502, detail=str(e))


@router.post(
    "/projects/{project_id}/segments/{segment_id}/regenerate-audio",
    response_model=SegmentResponse,
)
async def regenerate_audio(
    project_id: str,
    segment_id: str,
    request: RegenerateAudioRequest,
    x_user_id: str = Header(default="anonymous"),
    use_case: RegenerateSegmentMediaUseCase = Depends(get_segment_regeneration_use_case),
):
    try:
        return await use_case.regenerate_audio(
            RegenerateAudioCommand(
                project_id=project_id,
                owner_id=x_user_id,
                segment_id=segment_id,
                text=request.text,
                voice=request.voice,
            )
        )
    except ProjectNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except (AudioGenerationError, StorageError) as e:
        logger.warning(f"Audio regeneration failed: {e}", extra={"segment_id": segment_id})
        raise HTTPException(status_code=502, detail=str(e))
