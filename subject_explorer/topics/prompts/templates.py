"""
Menu prompt names and the context each one renders from.

Pure constants - no I/O or file system knowledge.
"""

from typing import Dict, FrozenSet


class Template:
    """Prompt names. Use these instead of raw strings."""

    INITIAL_MENU = "initial_menu"
    SUBMENU = "submenu"


# Variables a prompt cannot be rendered without
REQUIRED_CONTEXT: Dict[str, FrozenSet[str]] = {
    Template.INITIAL_MENU: frozenset({"topic", "min_items", "max_items"}),
    Template.SUBMENU: frozenset({"topic", "path", "item", "min_items", "max_items"}),
}
