"""
Script planning routes: split a script and write image prompts without
creating a project.
"""

from fastapi import APIRouter, Depends, HTTPException

from ..core import InvalidScriptError, PlanningError, ProviderError, get_logger
from ..dependencies import get_planner
from ..models import (
    BreakScriptRequest,
    BreakScriptResponse,
    ImagePromptsRequest,
    ImagePromptsResponse,
)
from ..services.pipeline.planning import SegmentPlanner

router = APIRouter(prefix="/api", tags=["scripts"])
logger = get_logger(__name__, component="scripts_routes")


@router.post("/break-script", response_model=BreakScriptResponse)
async def break_script(
    request: BreakScriptRequest,
    planner: SegmentPlanner = Depends(get_planner),
):
    try:
        chunks = await planner.break_script_into_chunks(request.script)
    except InvalidScriptError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except (PlanningError, ProviderError) as e:
        logger.error(f"Error breaking script: {e}")
        raise HTTPException(status_code=502, detail=str(e))
    return BreakScriptResponse(chunks=chunks)


@router.post("/generate-image-prompts", response_model=ImagePromptsResponse)
async def generate_image_prompts(
    request: ImagePromptsRequest,
    planner: SegmentPlanner = Depends(get_planner),
):
    if not request.chunks:
        raise HTTPException(status_code=400, detail="Chunks array is required")
    try:
        prompts = await planner.generate_image_prompts(
            request.chunks,
            style_id=request.style_id,
            previous_prompts=request.previous_prompts,
        )
    except (PlanningError, ProviderError) as e:
        logger.error(f"Error generating image prompts: {e}")
        raise HTTPException(status_code=502, detail=str(e))
    return ImagePromptsResponse(prompts=prompts)
