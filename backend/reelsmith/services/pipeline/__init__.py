"""
Generation pipeline: planning, media generation and orchestration
"""

from .orchestrator import GenerationParams, PipelineOrchestrator

__all__ = ["GenerationParams", "PipelineOrchestrator"]
