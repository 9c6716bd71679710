"""Qualification outcome and request states."""

from enum import Enum


class QualificationResult(str, Enum):
    """Outcome of checking requested services against a location."""

    QUALIFIED = "qualified"
    UNQUALIFIED = "unqualified"
    CONDITIONAL = "conditional"


class QualificationState(str, Enum):
    """TMF679 task states.

    The stored state stays a plain string; no transitions are enforced.
    """

    ACKNOWLEDGED = "acknowledged"
    IN_PROGRESS = "inProgress"
    DONE = "done"
    TERMINATED_WITH_ERROR = "terminatedWithError"
