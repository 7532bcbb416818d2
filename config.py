# config.py

import os
from dataclasses import dataclass

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_API_BASE = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_PORTS = (8080, 8081, 8082, 9090, 9091, 3000, 5000)

API_KEY_HELP = (
    "Please create a .env file with:\n"
    "GEMINI_API_KEY=your-api-key-here\n"
    "Get your free API key at: https://aistudio.google.com/app/apikey"
)


@dataclass(frozen=True)
class Settings:
    api_key: str | None
    model: str = DEFAULT_MODEL
    api_base: str = DEFAULT_API_BASE
    timeout: float = 60.0
    host: str = "0.0.0.0"
    ports: tuple[int, ...] = DEFAULT_PORTS
    debug: bool = False


def _parse_ports(raw: str) -> tuple[int, ...]:
    ports = []
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        port = int(part)
        if not 0 < port < 65536:
            raise ValueError(f"Port out of range: {port}")
        ports.append(port)
    if not ports:
        raise ValueError("TUTOR_PORTS must list at least one port")
    return tuple(ports)


def _parse_bool(raw: str) -> bool:
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def load_settings(environ=None) -> Settings:
    """
    Read settings from the environment.
    Call load_dotenv() first if a .env file should be honoured.
    """
    env = os.environ if environ is None else environ

    api_key = (env.get("GEMINI_API_KEY") or "").strip() or None

    timeout = float(env.get("GEMINI_TIMEOUT_SECONDS", "60"))
    if timeout <= 0:
        raise ValueError("GEMINI_TIMEOUT_SECONDS must be positive")

    return Settings(
        api_key=api_key,
        model=env.get("GEMINI_MODEL") or DEFAULT_MODEL,
        api_base=env.get("GEMINI_API_BASE") or DEFAULT_API_BASE,
        timeout=timeout,
        host=env.get("TUTOR_HOST") or "0.0.0.0",
        ports=_parse_ports(env["TUTOR_PORTS"]) if env.get("TUTOR_PORTS") else DEFAULT_PORTS,
        debug=_parse_bool(env.get("FLASK_DEBUG", "")),
    )
