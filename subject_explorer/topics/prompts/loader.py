"""
Menu prompt rendering.

Every name in Template must have both a `.jinja2` file and a REQUIRED_CONTEXT
entry; this is checked once at import. render() refuses to build a prompt
whose context is missing a required variable, so a menu request never goes to
the LLM with a half-filled prompt.
"""

from functools import lru_cache
from pathlib import Path
from typing import List

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from .templates import REQUIRED_CONTEXT, Template

TEMPLATES_DIR = Path(__file__).parent / "templates"


def prompt_names() -> List[str]:
    return [getattr(Template, name) for name in vars(Template) if not name.startswith("_")]


def _check_prompt_registry():
    for prompt in prompt_names():
        path = TEMPLATES_DIR / f"{prompt}.jinja2"
        if not path.exists():
            raise FileNotFoundError(f"Menu prompt missing: {path}")
        if prompt not in REQUIRED_CONTEXT:
            raise KeyError(f"No required context declared for menu prompt '{prompt}'")


_check_prompt_registry()


@lru_cache(maxsize=1)
def _environment() -> Environment:
    # Prompts are plain text sent to the LLM, never HTML
    return Environment(
        loader=FileSystemLoader(TEMPLATES_DIR),
        autoescape=False,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render(prompt: str, **context) -> str:
    """
    Render the menu prompt `prompt` (a Template constant).

    Raises:
        KeyError: `prompt` is not a registered menu prompt.
        ValueError: a required context variable was not supplied.
    """
    if prompt not in REQUIRED_CONTEXT:
        raise KeyError(f"Unknown menu prompt '{prompt}'")

    missing = REQUIRED_CONTEXT[prompt] - context.keys()
    if missing:
        raise ValueError(f"Prompt '{prompt}' is missing context: {', '.join(sorted(missing))}")

    return _environment().get_template(f"{prompt}.jinja2").render(**context)
