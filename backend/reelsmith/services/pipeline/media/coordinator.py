"""
Media Generation Coordinator

Fans out one image task and one audio task per segment, runs them all
concurrently and collects index-stable outcomes.

Failure policy:
    - image task failures are captured in that segment's ImageOutcome
    - transcription failures fall back to an estimated duration, no word timings
    - narration failures (and audio uploads) abort the whole generate() call
"""

import asyncio
import time
from contextlib import nullcontext
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from reelsmith.config import (
    DEFAULT_IMAGE_SIZE,
    MEDIA_MAX_CONCURRENCY,
    SECONDS_PER_WORD,
    WORDS_PER_BATCH,
    get_image_style,
)
from reelsmith.core import AudioGenerationError, StorageError, get_logger
from reelsmith.models import (
    AudioOutcome,
    FileRecord,
    ImageOutcome,
    MediaGenerationResult,
    PlannedSegment,
)
from reelsmith.services.captions import batch_transcription, estimate_duration
from reelsmith.services.infrastructure.media import (
    ImageBackend,
    SpeechSynthesizer,
    Transcriber,
)
from reelsmith.services.infrastructure.storage import ArtifactStore, ProjectRepository

from .routing import enhance_prompt, resolve_image_model, select_backend

logger = get_logger(__name__, component="media_coordinator")

_EXTENSIONS = {"image/jpeg": "jpg", "image/png": "png", "image/webp": "webp"}


class MediaGenerationCoordinator:
    """Stateless coordinator; every collaborator is injected."""

    def __init__(
        self,
        image_backends: Dict[str, ImageBackend],
        speech: SpeechSynthesizer,
        transcriber: Transcriber,
        artifacts: ArtifactStore,
        repository: ProjectRepository,
        max_concurrency: Optional[int] = MEDIA_MAX_CONCURRENCY,
        words_per_batch: int = WORDS_PER_BATCH,
        seconds_per_word: float = SECONDS_PER_WORD,
    ):
        self.image_backends = image_backends
        self.speech = speech
        self.transcriber = transcriber
        self.artifacts = artifacts
        self.repository = repository
        self.max_concurrency = max_concurrency
        self.words_per_batch = words_per_batch
        self.seconds_per_word = seconds_per_word

    async def generate(
        self,
        segments: Sequence[PlannedSegment],
        segment_ids: Sequence[str],
        voice: str,
        style_id: Optional[str] = None,
        *,
        owner_id: str,
        project_id: str,
        image_model: Optional[str] = None,
    ) -> MediaGenerationResult:
        """
        Generate images and narration for every segment concurrently.

        Args:
            segments: planned segments, in order
            segment_ids: persisted ids, ``segment_ids[i]`` belongs to ``segments[i]``
            voice: narration voice
            style_id: image style; unknown ids use the default style
            image_model: explicit image model key, overriding the style's model

        Raises:
            ValueError: if segments and segment_ids differ in length
            AudioGenerationError: if narration for any segment could not be produced
            StorageError: if narration audio could not be stored
        """
        if len(segments) != len(segment_ids):
            raise ValueError(
                f"Got {len(segments)} segments but {len(segment_ids)} segment ids"
            )

        semaphore = asyncio.Semaphore(self.max_concurrency) if self.max_concurrency else None
        started = time.perf_counter()

        image_tasks = [
            self._gated(
                semaphore,
                self.generate_single_image(
                    segment.image_prompt,
                    segment_ids[index],
                    index,
                    owner_id=owner_id,
                    project_id=project_id,
                    style_id=style_id,
                    image_model=image_model,
                ),
            )
            for index, segment in enumerate(segments)
        ]
        audio_tasks = [
            self._gated(
                semaphore,
                self.generate_single_audio(
                    segment.text,
                    segment_ids[index],
                    index,
                    voice,
                    owner_id=owner_id,
                    project_id=project_id,
                ),
            )
            for index, segment in enumerate(segments)
        ]

        # Let every task settle before surfacing a fatal audio error
        settled = await asyncio.gather(*image_tasks, *audio_tasks, return_exceptions=True)
        image_results: List[ImageOutcome] = list(settled[:len(segments)])
        audio_settled: List[Any] = list(settled[len(segments):])

        for outcome in image_results:
            if isinstance(outcome, BaseException):
                raise outcome
        for outcome in audio_settled:
            if isinstance(outcome, BaseException):
                raise outcome

        result = MediaGenerationResult(image_results=image_results, audio_results=audio_settled)

        logger.info(
            f"Media generated: {result.successful_images}/{len(segments)} images, "
            f"{len(result.audio_results)}/{len(segments)} audio",
            extra={"duration_seconds": round(time.perf_counter() - started, 3)},
        )
        if result.failed_images:
            logger.warning(
                "Some image generations failed",
                extra={"failed_images": [
                    {"index": r.index, "error": r.error} for r in result.failed_images
                ]},
            )
        return result

    @staticmethod
    async def _gated(semaphore: Optional[asyncio.Semaphore], coro):
        async with semaphore if semaphore is not None else nullcontext():
            return await coro

    # ---- images ----------------------------------------------------------

    async def generate_single_image(
        self,
        prompt: str,
        segment_id: str,
        index: int,
        *,
        owner_id: str,
        project_id: str,
        style_id: Optional[str] = None,
        image_model: Optional[str] = None,
    ) -> ImageOutcome:
        """Generate and store one segment image. Never raises."""
        style = get_image_style(style_id)
        full_prompt = enhance_prompt(prompt, style)
        model = resolve_image_model(image_model, style)

        try:
            backend_name = select_backend(model)
            backend = self.image_backends.get(backend_name)
            if backend is None:
                return ImageOutcome(
                    index=index,
                    prompt=full_prompt,
                    success=False,
                    error=f"No image backend configured for model {model}",
                )

            logger.debug(f"Generating image for segment {index}", extra={"model": model, "backend": backend_name})
            generated = await backend.generate(full_prompt, style.name, DEFAULT_IMAGE_SIZE, model)
            if not generated.success or not (generated.image_url or generated.image_bytes):
                return ImageOutcome(
                    index=index,
                    prompt=full_prompt,
                    success=False,
                    error=generated.error or "No image generated",
                )

            image_url = await self._persist_image(
                backend, generated, prompt=full_prompt, model=model,
                owner_id=owner_id, project_id=project_id, segment_id=segment_id, index=index,
            )
            return ImageOutcome(index=index, prompt=full_prompt, success=True, image_url=image_url)

        except Exception as e:
            logger.error(f"Image generation failed for segment {index}: {e}", extra={"model": model})
            return ImageOutcome(index=index, prompt=full_prompt, success=False, error=str(e))

    async def _persist_image(
        self,
        backend: ImageBackend,
        generated,
        *,
        prompt: str,
        model: str,
        owner_id: str,
        project_id: str,
        segment_id: str,
        index: int,
    ) -> str:
        """Store the image and return the URL to keep.

        Falls back to the backend's hosted URL when storing fails; raises when
        there is nothing to fall back to.
        """
        extension = _EXTENSIONS.get(generated.mime_type, "jpg")
        try:
            data = generated.image_bytes
            if data is None:
                data = await backend.download(generated.image_url)
            stored = await self.artifacts.upload(
                data, owner_id, project_id, index, segment_id, "image", extension
            )
        except Exception as e:
            if generated.image_url:
                logger.warning(
                    f"Storing image for segment {index} failed, keeping provider URL: {e}"
                )
                return generated.image_url
            raise

        self._record_file(
            FileRecord(
                project_id=project_id,
                segment_id=segment_id,
                file_type="image",
                file_name=f"image_{segment_id}_{int(time.time() * 1000)}.{extension}",
                original_name=f"segment_{index}_image.{extension}",
                mime_type=generated.mime_type,
                file_size=len(data),
                storage_key=stored.key,
                url=stored.url,
                metadata={
                    "prompt": prompt,
                    "model": model,
                    "generated_at": datetime.now().isoformat(),
                },
            )
        )
        return stored.url

    # ---- audio -----------------------------------------------------------

    async def generate_single_audio(
        self,
        text: str,
        segment_id: str,
        index: int,
        voice: str,
        *,
        owner_id: str,
        project_id: str,
    ) -> AudioOutcome:
        """
        Narrate one segment, store the audio and derive caption timings.

        Raises:
            AudioGenerationError: if narration could not be produced
            StorageError: if the audio could not be stored
        """
        try:
            audio = await self.speech.synthesize(text, voice)
        except AudioGenerationError:
            raise
        except Exception as e:
            raise AudioGenerationError(f"Narration failed for segment {index}: {e}") from e

        word_timings = None
        try:
            transcription = await self.transcriber.transcribe(audio)
            word_timings = batch_transcription(transcription.words, self.words_per_batch) or None
            if transcription.duration > 0:
                duration = transcription.duration
            elif word_timings:
                duration = word_timings[-1].end
            else:
                duration = estimate_duration(text, self.seconds_per_word)
        except Exception as e:
            word_timings = None
            duration = estimate_duration(text, self.seconds_per_word)
            logger.warning(
                f"Transcription failed for segment {index}, using estimated duration: {e}",
                extra={"estimated_duration": duration},
            )

        try:
            stored = await self.artifacts.upload(
                audio, owner_id, project_id, index, segment_id, "audio", "mp3"
            )
        except StorageError:
            raise
        except Exception as e:
            raise StorageError(f"Failed to store audio for segment {index}: {e}") from e

        self._record_file(
            FileRecord(
                project_id=project_id,
                segment_id=segment_id,
                file_type="audio",
                file_name=f"audio_{segment_id}_{int(time.time() * 1000)}.mp3",
                original_name=f"segment_{index}_audio.mp3",
                mime_type="audio/mpeg",
                file_size=len(audio),
                storage_key=stored.key,
                url=stored.url,
                metadata={
                    "text": text,
                    "voice": voice,
                    "duration": duration,
                    "word_timings": [b.to_dict() for b in word_timings] if word_timings else None,
                    "generated_at": datetime.now().isoformat(),
                },
            )
        )

        logger.debug(f"Audio ready for segment {index}", extra={"audio_duration": duration})
        return AudioOutcome(
            index=index,
            segment_id=segment_id,
            audio_url=stored.url,
            duration=duration,
            word_timings=word_timings,
        )

    def _record_file(self, record: FileRecord) -> None:
        try:
            self.repository.create_file_record(record)
        except Exception as e:
            logger.warning(
                f"Failed to create {record.file_type} file record for segment {record.segment_id}: {e}"
            )
