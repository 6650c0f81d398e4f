"""Configuration defaults and .env loading.

WHY: The analyzer can be pointed at a user dictionary, the HTTP API needs
a bind address, and entry points need a log level. Keeping these in one
module means deployments change behaviour through the environment, not
through code edits.

HOW: python-dotenv loads the .env file on import. Each setting is a
module-level constant read from the environment with a default. Helpers
that can fail on bad values (load_port) raise ValueError with a clear
message.

RULES:
- All settings use the JA_TITLE_WRAP_ prefix
- An empty JA_TITLE_WRAP_USER_DICT means "no user dictionary"
- Defaults are safe for local use: no user dictionary, WARNING logs,
  API on 0.0.0.0:8000
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the working directory
load_dotenv()

USER_DICT_PATH = os.getenv("JA_TITLE_WRAP_USER_DICT", "").strip() or None
"""Optional path to a janome user dictionary CSV (IPADIC format)."""

USER_DICT_ENCODING = os.getenv("JA_TITLE_WRAP_USER_DICT_ENCODING", "utf8")

LOG_LEVEL = os.getenv("JA_TITLE_WRAP_LOG_LEVEL", "WARNING").upper()

API_HOST = os.getenv("JA_TITLE_WRAP_HOST", "0.0.0.0")

DEFAULT_API_PORT = 8000


def load_port() -> int:
    """Read the API port from the environment.

    RULES:
    - Unset or blank means DEFAULT_API_PORT
    - Raises ValueError if the value is not an integer in 1–65535
    """
    raw = os.getenv("JA_TITLE_WRAP_PORT", "").strip()
    if not raw:
        return DEFAULT_API_PORT
    try:
        port = int(raw)
    except ValueError:
        raise ValueError(
            "JA_TITLE_WRAP_PORT must be an integer, got '{}'".format(raw)
        ) from None
    if not 1 <= port <= 65535:
        raise ValueError(
            "JA_TITLE_WRAP_PORT must be between 1 and 65535, got {}".format(port)
        )
    return port
