"""
Decode Bright Sky documents into domain models.

The JSON decoding itself is left to ``json``; this module validates the
decoded document against ``schemas.Response``. Any violation (missing
field, wrong primitive type, unknown enumeration tag, malformed
timestamp) rejects the whole document with a ``DecodeError``.

Usage::

    from brightsky_report.parser import load_response

    response = load_response(sys.stdin.read())
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import ValidationError

from brightsky_report.schemas import Response

logger = logging.getLogger(__name__)

ROOT_PATH = "<root>"


def _format_loc(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in loc) if loc else ROOT_PATH


class DecodeError(ValueError):
    """A well-formed document that does not match the response schema.

    Attributes:
        path: Dotted path of the first offending field, e.g.
            ``sources.0.station_name``.
        errors: Every ``(path, message)`` problem found in the document.
    """

    def __init__(self, path: str, message: str, errors: list[tuple[str, str]] | None = None):
        self.path = path
        self.errors = errors if errors is not None else [(path, message)]
        text = f"{path}: {message}"
        if len(self.errors) > 1:
            text += f" (and {len(self.errors) - 1} more error(s))"
        super().__init__(text)

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> DecodeError:
        """Build a DecodeError from a pydantic ``ValidationError``."""
        errors = [(_format_loc(err["loc"]), err["msg"]) for err in exc.errors()]
        path, message = errors[0]
        return cls(path, message, errors)


def parse_response(document: Any) -> Response:
    """
    Validate a decoded JSON document into a ``Response``.

    Args:
        document: Output of a JSON decoder (dicts, lists and primitives).

    Returns:
        The immutable Response.

    Raises:
        DecodeError: If the document does not match the schema.
    """
    try:
        response = Response.model_validate(document)
    except ValidationError as exc:
        raise DecodeError.from_validation_error(exc) from exc

    logger.debug(
        "Decoded %d observation(s) from %d station(s)",
        len(response.weather),
        len(response.sources),
    )
    return response


def load_response(text: str | bytes) -> Response:
    """
    Decode raw JSON text into a ``Response``.

    JSON syntax errors propagate unchanged as ``json.JSONDecodeError``.
    That includes bytes that are not UTF-8 and the non-standard
    ``NaN``/``Infinity``/``-Infinity`` tokens.
    """
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise json.JSONDecodeError(
                f"Invalid UTF-8 ({exc.reason})",
                text.decode("utf-8", errors="replace"),
                exc.start,
            ) from exc

    doc = text

    def _reject_constant(name: str) -> float:
        raise json.JSONDecodeError(f"Invalid constant {name}", doc, doc.find(name))

    return parse_response(json.loads(doc, parse_constant=_reject_constant))
