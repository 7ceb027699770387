"""
Project status constants and lifecycle rules.

    draft --(script submitted)--> generating --(all steps succeed)--> completed
    generating --(any fatal step raises)--> failed
"""

from enum import Enum

from reelsmith.core.exceptions import InvalidStatusTransition


class ProjectStatus(Enum):
    """Enumeration of all possible project statuses."""

    DRAFT = "draft"
    GENERATING = "generating"
    COMPLETED = "completed"
    FAILED = "failed"

    def is_terminal(self) -> bool:
        """Check if this status is a terminal state (no further progress)."""
        return self in (ProjectStatus.COMPLETED, ProjectStatus.FAILED)

    def can_transition_to(self, target: "ProjectStatus") -> bool:
        return target in ALLOWED_TRANSITIONS[self]

    def ensure_transition(self, target: "ProjectStatus") -> None:
        """Raise InvalidStatusTransition unless ``self -> target`` is allowed."""
        if not self.can_transition_to(target):
            raise InvalidStatusTransition(self.value, target.value)


ALLOWED_TRANSITIONS = {
    ProjectStatus.DRAFT: frozenset({ProjectStatus.GENERATING}),
    ProjectStatus.GENERATING: frozenset({ProjectStatus.COMPLETED, ProjectStatus.FAILED}),
    ProjectStatus.COMPLETED: frozenset(),
    ProjectStatus.FAILED: frozenset(),
}


__all__ = ["ProjectStatus", "ALLOWED_TRANSITIONS"]
