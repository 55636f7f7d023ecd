"""
Topics Layer - Topic Service Contract and Implementations

The Topic Service opens exploration sessions and produces menus. The
navigation controller depends only on the TopicService interface.
"""

from subject_explorer.topics.interface import SessionStart, Submenu, TopicService
from subject_explorer.topics.mock import MockTopicService
from subject_explorer.topics.generative import GenerativeTopicService, MenuProposal
from subject_explorer.topics.remote import RemoteTopicService

__all__ = [
    "GenerativeTopicService",
    "MenuProposal",
    "MockTopicService",
    "RemoteTopicService",
    "SessionStart",
    "Submenu",
    "TopicService",
]
