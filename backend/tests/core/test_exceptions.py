"""
Tests for reelsmith.core.exceptions
"""

from reelsmith.core import (
    AudioGenerationError,
    InfrastructureError,
    InvalidScriptError,
    InvalidStatusTransition,
    PipelineError,
    PlanningError,
    ProjectNotFoundError,
    ReelsmithError,
    TranscriptionError,
)


def test_hierarchy():
    assert issubclass(PlanningError, PipelineError)
    assert issubclass(AudioGenerationError, PipelineError)
    assert issubclass(TranscriptionError, InfrastructureError)
    assert issubclass(InfrastructureError, ReelsmithError)


def test_invalid_script_is_a_value_error():
    assert issubclass(InvalidScriptError, ValueError)


def test_project_not_found_is_a_lookup_error():
    assert issubclass(ProjectNotFoundError, LookupError)


def test_invalid_transition_message():
    error = InvalidStatusTransition("completed", "generating")
    assert error.current == "completed"
    assert error.target == "generating"
    assert "completed" in str(error) and "generating" in str(error)
