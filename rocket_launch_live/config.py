"""
Client configuration.

Defaults ship with the package in defaults.json. Environment variables
(optionally read from a .env file) override them, and explicit constructor
arguments override both.
"""

import json
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

CONFIG_DIR = Path(__file__).parent


def load_defaults() -> dict:
    """Load packaged client defaults from JSON."""
    defaults_path = CONFIG_DIR / "defaults.json"
    with open(defaults_path, "r", encoding="utf-8") as f:
        return json.load(f)


DEFAULTS = load_defaults()

API_KEY_ENV = DEFAULTS["env"]["api_key"]
BASE_URL_ENV = DEFAULTS["env"]["base_url"]
ENDPOINTS = tuple(DEFAULTS["endpoints"])


def resolve_api_key(api_key: Optional[str] = None) -> str:
    """
    Return the API key to authenticate with.

    Args:
        api_key: Explicit key. Takes precedence over the environment.

    Raises:
        ValueError: If no key is given and RLL_API_KEY is unset or empty.
    """
    load_dotenv()

    key = api_key or os.getenv(API_KEY_ENV)
    if not key:
        raise ValueError(
            f"RocketLaunch.Live API key not found. Set {API_KEY_ENV} in the "
            "environment or .env file, or pass api_key to the client."
        )
    return key


def resolve_base_url(base_url: Optional[str] = None) -> str:
    """Return the API base URL without a trailing slash."""
    load_dotenv()

    url = base_url or os.getenv(BASE_URL_ENV) or DEFAULTS["base_url"]
    return url.rstrip("/")
