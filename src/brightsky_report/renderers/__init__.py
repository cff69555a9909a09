"""Pure rendering functions: decoded data -> report text.

All renderers follow the same pattern:
  - Input: schemas models or analysis output
  - Output: str (plain text, no trailing newline)
  - No side effects, no I/O

Used by cli.py, which prints the result.

Public API:
  - report: render_block, render_report, NO_DATA

Templates live in ``templates/`` as ``{name}.txt.j2``. They are rendered
without autoescaping since the output is plain text.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=False,
    undefined=jinja2.StrictUndefined,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
