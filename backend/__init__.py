"""FastAPI backend that proxies plant image analysis to Gemini."""

__version__ = "1.0.0"
