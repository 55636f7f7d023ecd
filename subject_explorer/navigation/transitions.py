"""
Transition Types - Navigation State Machine Vocabulary

Names for what happened to the ExplorerState on each controller step, and the
formatting of breadcrumb history entries.
"""

from enum import Enum, auto


TOPIC_PREFIX = "Topic: "
SELECTION_PREFIX = "Selected: "

START_FAILED_MESSAGE = "Failed to start session"
SELECTION_FAILED_MESSAGE = "Failed to process selection"


class NavigationTransition(Enum):
    """
    Strict State Machine terminology for the controller's state changes.
    """

    STARTED = auto()  # [any] -> [NoSession, Loading]
    SESSION_OPENED = auto()  # [NoSession, Loading] -> [Session, Idle]
    SESSION_FAILED = auto()  # [NoSession, Loading] -> [NoSession, Error]
    SELECTING = auto()  # [Session, Idle|Error] -> [Session, Loading]
    DRILLED_DOWN = auto()  # [Session, Loading] -> [Session, Idle], menu replaced
    SELECTION_FAILED = auto()  # [Session, Loading] -> [Session, Error], menu kept
    RESET = auto()  # [any] -> [NoSession, Idle]
    DISCARDED = auto()  # A stale response arrived; state untouched


def topic_entry(topic: str) -> str:
    return f"{TOPIC_PREFIX}{topic}"


def selection_entry(item: str) -> str:
    return f"{SELECTION_PREFIX}{item}"
