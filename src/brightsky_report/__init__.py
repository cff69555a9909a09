"""Bright Sky Report - readable weather reports from Bright Sky API payloads.

Architecture::

    schemas.py     Pydantic models (stations, observations, enumerations)
    parser.py      Decoded JSON document -> Response, DecodeError
    analysis/      Observation -> owning station association
    renderers/     Pure data -> text report (Jinja2 templates)
    config.py      Settings from environment / .env
    cli.py         Reads a payload, prints the report

Data flow: JSON text -> parser -> analysis -> renderers -> stdout
"""

__version__ = "0.1.0"

from brightsky_report.config import Settings
from brightsky_report.parser import DecodeError, load_response, parse_response
from brightsky_report.renderers.report import render_report
from brightsky_report.schemas import Response

__all__ = [
    "DecodeError",
    "Response",
    "Settings",
    "__version__",
    "load_response",
    "parse_response",
    "render_report",
]
