"""
Segment Planner - splits a script into narration chunks and writes one
visual prompt per chunk.
"""

import json
from typing import Any, List, Optional

from reelsmith.config import (
    MAX_SEGMENTS,
    PROMPT_MODEL,
    SEGMENTER_MODEL,
    ImageStyle,
    get_image_style,
)
from reelsmith.core import InvalidScriptError, LogTimer, PlanningError, get_logger
from reelsmith.models import PlannedSegment
from reelsmith.services.infrastructure.llm import LLMConfig, LLMProvider
from reelsmith.services.infrastructure.parsing import normalize_whitespace, parse_json_response

from .prompts import (
    IMAGE_PROMPTS,
    IMAGE_PROMPTS_SCHEMA,
    IMAGE_PROMPTS_USER,
    PREVIOUS_PROMPTS_CONTEXT,
    SEGMENT_SCHEMA,
    SEGMENT_SCRIPT,
)

logger = get_logger(__name__, component="segment_planner")


def _as_prompt_text(prompt: Any) -> str:
    # Structured prompts are stored JSON-encoded
    if isinstance(prompt, str):
        return prompt
    return json.dumps(prompt, ensure_ascii=False)


class SegmentPlanner:
    """Stateless planner; the text-generation provider is injected."""

    def __init__(
        self,
        llm: LLMProvider,
        max_segments: int = MAX_SEGMENTS,
        segmenter_model: Optional[str] = None,
        prompt_model: Optional[str] = None,
    ):
        self.llm = llm
        self.max_segments = max_segments
        self.segmenter_model = segmenter_model or SEGMENTER_MODEL
        self.prompt_model = prompt_model or PROMPT_MODEL

    async def plan(self, script: str, style_id: Optional[str] = None) -> List[PlannedSegment]:
        """
        Turn a script into ordered segments of ``(text, image_prompt)``.

        Raises:
            InvalidScriptError: if the script is empty
            PlanningError: if the model output is unusable
        """
        chunks = await self.break_script_into_chunks(script)
        prompts = await self.generate_image_prompts(chunks, style_id=style_id)
        return [PlannedSegment(text=c, image_prompt=p) for c, p in zip(chunks, prompts)]

    async def break_script_into_chunks(self, script: str) -> List[str]:
        if not isinstance(script, str) or not script.strip():
            raise InvalidScriptError("Script is required and must be a non-empty string")

        config = LLMConfig(
            model=self.segmenter_model,
            temperature=1.0,
            system_instruction=SEGMENT_SCRIPT.format(max_chunks=self.max_segments),
            response_schema=SEGMENT_SCHEMA,
        )

        with LogTimer(logger, "script segmentation"):
            response = await self.llm.generate(script, config)

        payload = parse_json_response(response.text)
        chunks = payload.get("chunks") if isinstance(payload, dict) else None

        if not isinstance(chunks, list) or not chunks:
            logger.error("Failed to parse script chunks", extra={"response_preview": response.text[:200]})
            raise PlanningError("Failed to parse script chunks")
        if not all(isinstance(c, str) and c.strip() for c in chunks):
            raise PlanningError("Script chunks must be non-empty strings")
        if len(chunks) > self.max_segments:
            raise PlanningError(
                f"Script was split into {len(chunks)} chunks; at most {self.max_segments} are allowed"
            )

        chunks = [c.strip() for c in chunks]
        self._check_verbatim(script, chunks)

        logger.info(f"Script split into {len(chunks)} chunks", extra={"chunk_count": len(chunks)})
        return chunks

    async def generate_image_prompts(
        self,
        chunks: List[str],
        style_id: Optional[str] = None,
        previous_prompts: Optional[List[str]] = None,
    ) -> List[str]:
        """
        One visual prompt per chunk, in chunk order.

        ``previous_prompts`` are earlier prompts of the same sequence, passed as
        continuity context when prompts are written in several calls.

        Raises:
            PlanningError: if the output is unparseable or the count differs
        """
        if not chunks:
            raise PlanningError("No chunks to write image prompts for")

        style = get_image_style(style_id)
        config = LLMConfig(
            model=self.prompt_model,
            temperature=0.8,
            system_instruction=self._prompt_instruction(style),
            response_schema=IMAGE_PROMPTS_SCHEMA,
        )

        user_content = IMAGE_PROMPTS_USER.format(chunks_json=json.dumps(chunks, ensure_ascii=False))
        if previous_prompts:
            user_content += PREVIOUS_PROMPTS_CONTEXT.format(
                previous_json=json.dumps(previous_prompts, ensure_ascii=False)
            )

        with LogTimer(logger, "image prompt generation"):
            response = await self.llm.generate(user_content, config)

        payload = parse_json_response(response.text)
        prompts = payload.get("prompts") if isinstance(payload, dict) else None
        if not isinstance(prompts, list):
            logger.error("Failed to parse image prompts", extra={"response_preview": response.text[:200]})
            raise PlanningError("Failed to parse image prompts")

        if len(prompts) != len(chunks):
            raise PlanningError(
                f"Prompt count mismatch: expected {len(chunks)}, got {len(prompts)}"
            )

        return [_as_prompt_text(p) for p in prompts]

    @staticmethod
    def _prompt_instruction(style: ImageStyle) -> str:
        return IMAGE_PROMPTS.format(style_name=style.name, style_prompt=style.system_prompt)

    @staticmethod
    def _check_verbatim(script: str, chunks: List[str]) -> None:
        normalized_script = normalize_whitespace(script)
        for index, chunk in enumerate(chunks):
            if normalize_whitespace(chunk) not in normalized_script:
                logger.warning(
                    f"Chunk {index} does not appear verbatim in the script",
                    extra={"chunk_index": index, "chunk_preview": chunk[:80]},
                )
