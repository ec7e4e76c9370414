"""
app/flow/states.py

Purpose: Defines the submission workflow states

- One enum value per step of handling a contact form submission
  (VALIDATING, PERSISTING, NOTIFYING, COMMITTED and the two failure exits)
- Single source of truth for allowed transitions
"""

from enum import Enum
from typing import Dict, List


class SubmissionState(str, Enum):
    """
    States a single submission passes through.
    COMMITTED, REJECTED_INPUT and PERSIST_FAILED are terminal.
    """

    VALIDATING = "VALIDATING"
    PERSISTING = "PERSISTING"
    NOTIFYING = "NOTIFYING"
    COMMITTED = "COMMITTED"

    # Exits
    REJECTED_INPUT = "REJECTED_INPUT"
    PERSIST_FAILED = "PERSIST_FAILED"


STATE_TRANSITIONS: Dict[SubmissionState, List[SubmissionState]] = {
    SubmissionState.VALIDATING: [
        SubmissionState.PERSISTING,
        SubmissionState.REJECTED_INPUT,
    ],
    SubmissionState.PERSISTING: [
        SubmissionState.NOTIFYING,
        SubmissionState.COMMITTED,  # SMS skipped, no credentials
        SubmissionState.PERSIST_FAILED,
    ],
    SubmissionState.NOTIFYING: [
        SubmissionState.COMMITTED,
        SubmissionState.PERSIST_FAILED,  # Commit itself failed
    ],
    SubmissionState.COMMITTED: [],
    SubmissionState.REJECTED_INPUT: [],
    SubmissionState.PERSIST_FAILED: [],
}

TERMINAL_STATES = frozenset(
    state for state, targets in STATE_TRANSITIONS.items() if not targets
)


def is_valid_transition(from_state: SubmissionState, to_state: SubmissionState) -> bool:
    """
    Checks if a state transition is valid.

    Args:
        from_state: Current state
        to_state: Target state

    Returns:
        True if transition is allowed, False otherwise
    """
    return to_state in STATE_TRANSITIONS.get(from_state, [])


def is_terminal(state: SubmissionState) -> bool:
    return state in TERMINAL_STATES
