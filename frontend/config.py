# config.py - Frontend configuration
import os

from dotenv import load_dotenv

load_dotenv()

# FastAPI Backend URL
API_BASE_URL = os.getenv("PLANTCARE_API_URL", "http://127.0.0.1:8000").rstrip("/")
REQUEST_TIMEOUT = float(os.getenv("PLANTCARE_REQUEST_TIMEOUT", "60"))
HEALTH_TIMEOUT = 3

# Append the underlying error text to the English error message
SHOW_ERROR_DETAILS = os.getenv("PLANTCARE_SHOW_ERROR_DETAILS", "false").lower() in ("1", "true", "yes")

LOG_LEVEL = os.getenv("PLANTCARE_LOG_LEVEL", "INFO").upper()

ACCEPTED_IMAGE_TYPES = ["jpg", "jpeg", "png", "webp"]
PREVIEW_SIZE = (300, 300)
