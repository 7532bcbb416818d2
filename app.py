from flask import Flask, Response, jsonify, request
from flask_cors import CORS
from dotenv import load_dotenv
import logging
import socket
import sys

from config import API_KEY_HELP, Settings, load_settings
from subjects.registry import DEFAULT_REGISTRY, SubjectRegistry
from tutor import replies
from tutor.handler import handle_ask
from upstream.gemini_client import GeminiClient


# -------------------------------------------------
# Setup
# -------------------------------------------------

load_dotenv()
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

settings = load_settings()

if not settings.api_key:
    logger.warning("GEMINI_API_KEY is not set. Gemini calls will fail.")


def build_client(settings: Settings) -> GeminiClient:
    return GeminiClient(
        api_key=settings.api_key,
        model=settings.model,
        api_base=settings.api_base,
        timeout=settings.timeout,
    )


def envelope_response(status: int, text: str) -> Response:
    return Response(
        replies.build_envelope(text),
        status=status,
        mimetype="application/json",
    )


# -------------------------------------------------
# App factory
# -------------------------------------------------

def create_app(registry: SubjectRegistry = DEFAULT_REGISTRY, client=None) -> Flask:
    """
    Build the Flask app around an immutable registry and an upstream client.
    Tests pass their own registry and a fake client.
    """
    if client is None:
        client = build_client(settings)

    app = Flask(__name__)
    CORS(
        app,
        origins="*",
        send_wildcard=True,
        methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok"})

    @app.route("/ask", methods=["POST"])
    def ask():
        logger.info(f"Request received: {request.method}")
        result = handle_ask(
            request.get_data(as_text=True),
            registry=registry,
            client=client,
        )
        return envelope_response(result.status, result.reply)

    @app.errorhandler(405)
    def method_not_allowed(e):
        logger.info(f"Wrong method: {request.method}")
        return envelope_response(405, replies.METHOD_NOT_ALLOWED)

    return app


# -------------------------------------------------
# Port selection
# -------------------------------------------------

def pick_port(host: str, ports) -> int:
    """Return the first candidate port that can be bound on host."""
    for port in ports:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as probe:
            try:
                probe.bind((host, port))
            except OSError:
                logger.warning(f"Port {port} is busy, trying next...")
                continue
        return port

    raise RuntimeError("All ports are in use! Please close some applications.")


# -------------------------------------------------
# Entry point
# -------------------------------------------------

def main() -> int:
    if not settings.api_key:
        logger.error("GEMINI_API_KEY not found!\n" + API_KEY_HELP)
        return 1

    try:
        port = pick_port(settings.host, settings.ports)
    except RuntimeError as e:
        logger.error(str(e))
        return 1

    logger.info(f"AI Tutor backend running at http://localhost:{port}/")
    logger.info(f"Using Google Gemini model {settings.model}")

    app = create_app()
    app.run(host=settings.host, port=port, debug=settings.debug, threaded=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
