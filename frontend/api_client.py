# api_client.py - HTTP client for the Plant Health Analyzer backend
import logging

import requests

from frontend.config import API_BASE_URL, HEALTH_TIMEOUT, REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


class AnalysisServiceError(Exception):
    """The backend answered, but not with a usable result."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


def _safe_json(resp):
    try:
        body = resp.json()
    except ValueError:
        return {"status_code": getattr(resp, "status_code", None), "text": getattr(resp, "text", "")}
    if not isinstance(body, dict):
        return {"text": getattr(resp, "text", "")}
    return body


class PlantHealthClient:
    """
    Each method issues exactly one request to the backend, which in turn
    makes one call to the generative model.
    """

    def __init__(self, base_url=API_BASE_URL, timeout=REQUEST_TIMEOUT, session=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _post_for_text(self, path, payload):
        url = f"{self.base_url}{path}"
        response = self.session.post(url, json=payload, timeout=self.timeout)
        body = _safe_json(response)

        if response.status_code != 200:
            detail = body.get("detail") or body.get("text") or "unknown error"
            raise AnalysisServiceError(f"API Error {response.status_code}: {detail}", status_code=response.status_code)

        text = body.get("text")
        if not text:
            raise AnalysisServiceError(f"{path} returned no text", status_code=response.status_code)
        return text

    def analyze(self, part):
        """Send a GenerativePart for analysis and return the English text"""
        logger.info(f"Requesting analysis ({part.mime_type}, {len(part.data)} base64 chars)")
        return self._post_for_text("/analyze", part.to_payload())

    def translate(self, text):
        """Return the Gujarati translation of an analysis"""
        logger.info(f"Requesting translation of {len(text)} characters")
        return self._post_for_text("/translate", {"text": text})

    def check_connection(self, timeout=HEALTH_TIMEOUT):
        """
        Check if the backend is available.
        Returns (connected: bool, info: dict)
        """
        try:
            resp = self.session.get(f"{self.base_url}/health", timeout=timeout)
            if resp.status_code == 200:
                return True, _safe_json(resp)
            return False, _safe_json(resp)
        except requests.exceptions.RequestException as e:
            return False, {"error": str(e)}
