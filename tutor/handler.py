# tutor/handler.py

import logging
from dataclasses import dataclass

from codec.json_text import ScanError, extract_field
from subjects.classifier import Matched, classify
from subjects.registry import SubjectRegistry
from tutor import replies
from upstream.gemini_client import UpstreamTransportError
from upstream.interpreter import interpret
from upstream.payload import build_request

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AskResult:
    status: int
    reply: str


def extract_message(body: str) -> str:
    """Pull "message" out of the inbound body. Anything unreadable counts as empty."""
    try:
        return extract_field(body or "", "message").strip()
    except ScanError as e:
        logger.info(f"No usable message in request: {e}")
        return ""


def fetch_tutor_reply(question: str, subject: str, client) -> str:
    request = build_request(question, subject)

    try:
        upstream = client.generate(request)
    except UpstreamTransportError as e:
        return replies.transport_failure(str(e))

    diagnostic = replies.status_diagnostic(upstream.status_code, upstream.body)
    if diagnostic is not None:
        logger.warning(f"Gemini returned {upstream.status_code}: {upstream.body[:200]}")
        return diagnostic

    return replies.describe_outcome(interpret(upstream.body))


def handle_ask(body: str, *, registry: SubjectRegistry, client) -> AskResult:
    """
    One /ask round trip:
    - empty message -> 400, no classification
    - no subject    -> rejection listing the registry, no upstream call
    - subject       -> Gemini call, status mapping, body interpretation
    """
    logger.info(f"Received body: {(body or '')[:200]}")

    message = extract_message(body)
    logger.info(f"Extracted message: {message!r}")

    if not message:
        return AskResult(400, replies.EMPTY_MESSAGE)

    result = classify(message, registry)
    if not isinstance(result, Matched):
        logger.info("Question outside allowed subjects")
        return AskResult(200, replies.rejection(registry))

    logger.info(f"Allowed subject detected: {result.subject}")
    reply = fetch_tutor_reply(message, result.subject, client)
    logger.info(f"Reply: {reply[:50]}...")
    return AskResult(200, reply)
