"""
Single place to:
- Load env vars from .env if present
- Name the environment variables the CLI and server read
- Hold the defaults
"""

import os

from dotenv import load_dotenv

# dev convenience; a shell export wins over .env
load_dotenv()

BASE_URL_ENV = "MM_BASE_URL"
API_KEY_ENV = "MM_API_KEY"
SERVER_API_KEY_ENV = "MM_SERVER_API_KEY"

DEFAULT_BASE_URL = "https://mastermind.darkube.app"


def server_api_key():
    """Read at request time so the key can change without restarting."""
    return os.getenv(SERVER_API_KEY_ENV) or None
