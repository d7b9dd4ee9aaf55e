# sequencer.py - View state and the analysis request sequence
import logging
from dataclasses import dataclass
from typing import Any, Optional

from frontend.encoding import UploadedImage, file_to_generative_part, make_preview
from frontend.texts import (
    ANALYSIS_ERROR,
    ANALYSIS_ERROR_GUJARATI,
    CONSENT_REQUIRED,
    FILE_REQUIRED,
)

logger = logging.getLogger(__name__)


@dataclass
class AnalysisState:
    file: Optional[UploadedImage] = None
    preview: Optional[Any] = None
    plant_info: Optional[str] = None
    gujarati_info: Optional[str] = None
    loading: bool = False
    consent: bool = False

    @property
    def can_analyze(self) -> bool:
        return self.file is not None and not self.loading


def select_file(state: AnalysisState, image: Optional[UploadedImage]) -> AnalysisState:
    """Replace the selected file and its preview; results stay until the next analysis"""
    state.file = image
    state.preview = make_preview(image) if image is not None else None
    return state


def analyze_plant_health(state: AnalysisState, client, show_error_details: bool = False) -> AnalysisState:
    """
    Run the two-step request sequence against the backend client.

    The image is encoded and analyzed first, then the English text is sent
    back for translation. Any failure in either step replaces both results
    with the fixed error messages.
    """
    if not state.consent or state.file is None:
        state.plant_info = CONSENT_REQUIRED if not state.consent else FILE_REQUIRED
        state.loading = False
        return state

    state.loading = True
    try:
        part = file_to_generative_part(state.file)
        text = client.analyze(part)
        gujarati_text = client.translate(text)
    except Exception as e:
        logger.exception(f"Error analyzing plant health for {state.file.name}")
        message = ANALYSIS_ERROR
        if show_error_details:
            message = f"{ANALYSIS_ERROR} ({str(e)})"
        state.plant_info = message
        state.gujarati_info = ANALYSIS_ERROR_GUJARATI
    else:
        state.plant_info = text
        state.gujarati_info = gujarati_text
    finally:
        state.loading = False
    return state
