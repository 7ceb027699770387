"""
Planning - script segmentation and visual prompt writing
"""

from .planner import SegmentPlanner
from .prompts import PromptTemplate

__all__ = ["SegmentPlanner", "PromptTemplate"]
