# upstream/interpreter.py

"""
Classify a raw generateContent response body.

Several conditions can show up in the same body (a partial "text" next to
finishReason MAX_TOKENS, for example), so the checks run in a fixed order
and the first one that answers wins. New outcome kinds go into
OUTCOME_CHECKS at the priority they need, not at the end by default.
"""

import logging
import re

from codec.json_text import FieldNotFound, MalformedField, extract_field
from upstream.outcomes import (
    ApiError,
    EmptyContent,
    Malformed,
    RecitationBlocked,
    SafetyBlocked,
    Success,
    Truncated,
    UpstreamOutcome,
)

logger = logging.getLogger(__name__)

SNIPPET_LIMIT = 300

_EMPTY_PARTS = re.compile(r'"parts"\s*:\s*\[\s*\]')
# an escaped \"error\" inside generated text is not an error object
_ERROR_KEY = re.compile(r'(?<!\\)"error"\s*:')


def _finish_reason(reason: str):
    return re.compile(r'"finishReason"\s*:\s*"' + reason + '"')


_MAX_TOKENS = _finish_reason("MAX_TOKENS")
_SAFETY = _finish_reason("SAFETY")
_RECITATION = _finish_reason("RECITATION")


def _snippet(body: str) -> str:
    if len(body) > SNIPPET_LIMIT:
        return body[:SNIPPET_LIMIT] + "..."
    return body


# -------------------------------------------------
# Checks (each returns an outcome or None)
# -------------------------------------------------

def _check_empty(body):
    if not body.strip():
        return Malformed("empty")
    return None


def _check_truncated(body):
    if _MAX_TOKENS.search(body):
        logger.warning("Response truncated due to MAX_TOKENS")
        return Truncated()
    return None


def _check_safety(body):
    if _SAFETY.search(body):
        logger.warning("Response blocked by safety filters")
        return SafetyBlocked()
    return None


def _check_recitation(body):
    if _RECITATION.search(body):
        logger.warning("Response blocked for recitation")
        return RecitationBlocked()
    return None


def _check_error(body):
    match = _ERROR_KEY.search(body)
    if not match:
        return None

    logger.error("API returned an error object")
    try:
        return ApiError(extract_field(body[match.start():], "message"))
    except (FieldNotFound, MalformedField):
        return ApiError(None)


def _extract_text(body):
    try:
        text = extract_field(body, "text")
    except FieldNotFound:
        if _EMPTY_PARTS.search(body):
            return EmptyContent()
        logger.error("Could not find 'text' field in response")
        return Malformed("unexpected_format", _snippet(body))
    except MalformedField as e:
        logger.error(f"Malformed text field: {e}")
        return Malformed(e.reason)

    if not text.strip():
        return EmptyContent()

    logger.info(f"Extracted {len(text)} characters: {text[:100]!r}")
    return Success(text)


OUTCOME_CHECKS = (
    _check_empty,
    _check_truncated,
    _check_safety,
    _check_recitation,
    _check_error,
    _extract_text,
)


def interpret(body: str) -> UpstreamOutcome:
    """Return the UpstreamOutcome for a 200 response body."""
    body = body or ""
    for check in OUTCOME_CHECKS:
        outcome = check(body)
        if outcome is not None:
            return outcome

    # _extract_text always answers
    raise AssertionError("no outcome check matched")
