import logging
import os
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from .errors import RenderError, ValidationError

logger = logging.getLogger(__name__)

TEMPLATES_DIR = os.path.join(os.path.dirname(__file__), "templates")

_REPLACEMENTS = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)


def escape_html(value: str) -> str:
    # "&" first so the other entities are not double-escaped
    for raw, entity in _REPLACEMENTS:
        value = value.replace(raw, entity)
    return value


def require_list(value: Any) -> list:
    if not isinstance(value, list):
        iter(value)  # StrictUndefined raises here with the missing field name
        raise TypeError(f"expected a list, got {type(value).__name__}")
    return value


# Escaping is done explicitly with |esc; StrictUndefined makes a missing
# field fail the render instead of printing an empty string.
env = Environment(
    loader=FileSystemLoader(TEMPLATES_DIR),
    autoescape=False,
    undefined=StrictUndefined,
    keep_trailing_newline=False,
)
env.filters["esc"] = escape_html
env.filters["entries"] = require_list


def render_resume(resume: Any) -> str:
    """Render a tailored resume object to a standalone one-page HTML document."""
    if resume is None:
        raise ValidationError("Resume JSON is required.")
    try:
        return env.get_template("resume.html").render(r=resume)
    except Exception as e:
        logger.warning(f"Resume rendering failed: {e}")
        raise RenderError(str(e) or "Failed to render resume.") from e
