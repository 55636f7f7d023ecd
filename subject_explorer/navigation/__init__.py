"""
Navigation Layer - Session State Machine

Defines the NavigationController, which owns the exploration state and
sequences calls to the Topic Service.
"""

from subject_explorer.navigation.controller import NavigationController
from subject_explorer.navigation.transitions import NavigationTransition


__all__ = [
    "NavigationController",
    "NavigationTransition",
]
