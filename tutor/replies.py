# tutor/replies.py

from codec.json_text import escape_json
from subjects.registry import SubjectRegistry
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

EMPTY_MESSAGE = "ERROR: Empty message"
METHOD_NOT_ALLOWED = "ERROR: Only POST method supported"

_MALFORMED_REPLIES = {
    "empty": "⚠️ Received empty response from API",
    "unexpected_character": "⚠️ Malformed JSON response",
    "no_opening_quote": "⚠️ Malformed JSON response - no opening quote",
    "incomplete": "⚠️ Incomplete JSON response - no closing quote found",
}


def build_envelope(text: str) -> str:
    return '{"reply":"' + escape_json(text) + '"}'


def rejection(registry: SubjectRegistry) -> str:
    return (
        f"❌ Sorry, I can only answer questions about: {registry.describe()}. "
        "Please ask about one of these topics."
    )


def transport_failure(description: str) -> str:
    return f"⚠️ Error: {description}"


def status_diagnostic(status_code: int, body: str):
    """Reply for a non-200 upstream status, or None for 200."""
    if status_code == 200:
        return None
    if status_code == 429:
        return "⚠️ Rate limit exceeded (60 requests/min). Please wait a moment and try again."
    if status_code == 400:
        return f"⚠️ Invalid request format. Error: {body}"
    if status_code == 403:
        return "⚠️ API key invalid. Get a new key at https://aistudio.google.com/app/apikey"
    if status_code == 404:
        return f"⚠️ Model not found. Error: {body}"
    return f"⚠️ API Error: {status_code}"


def describe_outcome(outcome: UpstreamOutcome) -> str:
    if isinstance(outcome, Success):
        return outcome.text
    if isinstance(outcome, Truncated):
        return "⚠️ Response was too long and got cut off. Please ask a more specific question."
    if isinstance(outcome, SafetyBlocked):
        return "⚠️ Response blocked due to safety filters. Please rephrase your question."
    if isinstance(outcome, RecitationBlocked):
        return "⚠️ Response blocked due to recitation concerns. Please rephrase your question."
    if isinstance(outcome, ApiError):
        if outcome.message:
            return f"⚠️ API Error: {outcome.message}"
        return "⚠️ API returned an error. Check console for details."
    if isinstance(outcome, EmptyContent):
        return "⚠️ API returned empty content. The response may have been filtered or truncated."
    if isinstance(outcome, Malformed):
        if outcome.reason == "unexpected_format":
            return f"⚠️ Unexpected response format: {outcome.snippet or ''}"
        return _MALFORMED_REPLIES[outcome.reason]

    raise TypeError(f"Unknown upstream outcome: {outcome!r}")
