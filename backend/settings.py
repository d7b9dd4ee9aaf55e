# settings.py - Backend configuration
"""
Configuration for the Plant Health Analyzer backend.

Values have sensible defaults but can be overridden via environment
variables or a local .env file.
"""

import os

from dotenv import load_dotenv

load_dotenv()


# Gemini configuration
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-1.5-flash")

# Server configuration
API_HOST = os.getenv("PLANTCARE_API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("PLANTCARE_API_PORT", "8000"))
LOG_LEVEL = os.getenv("PLANTCARE_LOG_LEVEL", "INFO").upper()
