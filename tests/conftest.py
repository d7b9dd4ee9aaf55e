import io

import pytest
from PIL import Image

from frontend.encoding import UploadedImage


class RecordingClient:
    """Stands in for PlantHealthClient and records every remote call."""

    def __init__(self, analysis="Healthy tomato plant.", translation="સ્વસ્થ ટામેટાનો છોડ.",
                 fail_on=None, state=None):
        self.analysis = analysis
        self.translation = translation
        self.fail_on = fail_on
        self.state = state
        self.calls = []
        self.loading_during_calls = []

    def _record(self, name, argument):
        self.calls.append((name, argument))
        if self.state is not None:
            self.loading_during_calls.append(self.state.loading)

    def analyze(self, part):
        self._record("analyze", part)
        if self.fail_on == "analyze":
            raise ConnectionError("backend unreachable")
        return self.analysis

    def translate(self, text):
        self._record("translate", text)
        if self.fail_on == "translate":
            raise RuntimeError("quota exceeded")
        return self.translation


@pytest.fixture
def png_bytes():
    buffer = io.BytesIO()
    Image.new("RGB", (640, 480), color=(34, 139, 34)).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def leaf_image(png_bytes):
    return UploadedImage(name="leaf.png", mime_type="image/png", data=png_bytes)


@pytest.fixture
def recording_client():
    return RecordingClient()


@pytest.fixture
def make_client():
    return RecordingClient
