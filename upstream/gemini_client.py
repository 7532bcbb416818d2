# upstream/gemini_client.py

import logging
from dataclasses import dataclass

import requests

from upstream.payload import UpstreamRequest

logger = logging.getLogger(__name__)


class UpstreamTransportError(Exception):
    """The generateContent call never produced an HTTP response."""


@dataclass(frozen=True)
class UpstreamReply:
    status_code: int
    body: str


class GeminiClient:
    """
    Thin wrapper around the generateContent REST endpoint.

    The body goes out as the pre-serialized request text and comes back as
    raw text; interpretation happens in upstream.interpreter.
    """

    def __init__(self, api_key, model, api_base, timeout=60.0, session=None):
        self.api_key = api_key
        self.model = model
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def url(self) -> str:
        return f"{self.api_base}/models/{self.model}:generateContent"

    def generate(self, request: UpstreamRequest) -> UpstreamReply:
        payload = request.to_json()

        logger.info(f"Sending to Gemini: {self.url}")
        logger.info(f"Payload: {payload[:100]}...")

        try:
            response = self.session.post(
                self.url,
                data=payload.encode("utf-8"),
                headers={
                    "Content-Type": "application/json",
                    "x-goog-api-key": self.api_key or "",
                },
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Gemini call failed: {e}")
            raise UpstreamTransportError(str(e)) from e

        response.encoding = response.encoding or "utf-8"
        body = response.text

        logger.info(f"Response Code: {response.status_code}")
        logger.info(f"Raw response: {body[:200]}...")

        return UpstreamReply(status_code=response.status_code, body=body)
