# -*- coding: utf-8 -*-
import streamlit as st
import logging

from frontend.api_client import PlantHealthClient
from frontend.audio import synthesize_speech
from frontend.config import ACCEPTED_IMAGE_TYPES, API_BASE_URL, LOG_LEVEL, SHOW_ERROR_DETAILS
from frontend.encoding import UploadedImage
from frontend.sequencer import AnalysisState, analyze_plant_health, select_file
from frontend.texts import ANALYSIS_ERROR_GUJARATI, DISCLAIMER, UI_TEXTS, bilingual

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

# Set page configuration
st.set_page_config(
    page_title="🌿 Plant Health Analyzer",
    page_icon="🌿",
    layout="centered"
)

EN = UI_TEXTS["English"]
GU = UI_TEXTS["Gujarati"]


# -------- Styling --------
def apply_custom_css():
    st.markdown("""
    <style>
    [data-testid="stAppViewContainer"] {
        background: linear-gradient(135deg, #dcfce7 0%, #dbeafe 100%);
    }

    .gujarati-subtitle {
        text-align: center;
        color: #16a34a;
        font-size: 1.5rem;
        font-weight: 600;
        margin-bottom: 1.5rem;
    }

    .intro {
        text-align: center;
        color: #4b5563;
        margin-bottom: 1.5rem;
    }

    .stButton>button {
        background: #16a34a;
        color: white;
        border: none;
        border-radius: 8px;
        padding: 0.75rem 2rem;
        font-weight: 600;
    }

    .stButton>button:hover {
        background: #15803d;
    }

    .disclaimer {
        color: #6b7280;
        font-size: 0.85rem;
        margin-top: 1rem;
    }
    </style>
    """, unsafe_allow_html=True)


# Apply custom styling
apply_custom_css()


# -------- Session State Management --------
if "analysis_state" not in st.session_state:
    st.session_state.analysis_state = AnalysisState()

state = st.session_state.analysis_state


@st.cache_resource
def get_client():
    return PlantHealthClient(API_BASE_URL)


def on_file_change():
    uploaded_file = st.session_state.get("plant_image")
    image = UploadedImage.from_upload(uploaded_file) if uploaded_file is not None else None
    select_file(st.session_state.analysis_state, image)


def on_analyze_click():
    st.session_state.analysis_state.loading = True
    st.session_state.analyze_requested = True


# -------- Sidebar --------
with st.sidebar:
    st.markdown("### 🔌 Backend")
    st.caption(API_BASE_URL)
    if st.button("Check connection", key="check_backend"):
        connected, info = get_client().check_connection()
        if connected and info.get("model_ready"):
            st.success(f"✅ Connected ({info.get('model')})")
        elif connected:
            st.warning("⚠️ Backend is running but the AI model is not configured")
        else:
            st.error(f"🔌 Cannot connect to backend: {info.get('error', info)}")


# -------- Main Page --------
st.title(EN["app_title"])
st.markdown(f"<div class='gujarati-subtitle'>{GU['app_title']}</div>", unsafe_allow_html=True)
st.markdown(
    f"<p class='intro'>{EN['app_subtitle']}<br>{GU['app_subtitle']}</p>",
    unsafe_allow_html=True
)

state.consent = st.checkbox(EN["consent"], key="consent")

st.file_uploader(
    bilingual("upload_image"),
    type=ACCEPTED_IMAGE_TYPES,
    key="plant_image",
    on_change=on_file_change
)

if state.preview is not None:
    st.image(state.preview, caption=EN["preview_caption"], width=300)

st.button(
    bilingual("analyze_button"),
    key="analyze",
    type="primary",
    disabled=not state.can_analyze,
    on_click=on_analyze_click,
    width="stretch"
)

# The button above is already rendered disabled while this runs
if st.session_state.pop("analyze_requested", False):
    with st.spinner(bilingual("analyzing")):
        analyze_plant_health(state, get_client(), show_error_details=SHOW_ERROR_DETAILS)
    st.rerun()

# -------- Results --------
if state.plant_info:
    st.markdown(f"## {bilingual('results_title')}:")
    col1, col2 = st.columns(2, gap="large")

    with col1:
        st.subheader(EN["panel_title"])
        st.markdown(state.plant_info)

    with col2:
        st.subheader(GU["panel_title"])
        if state.gujarati_info:
            st.markdown(state.gujarati_info)

            if state.gujarati_info != ANALYSIS_ERROR_GUJARATI and st.button(
                f"🔊 {bilingual('listen')}", key="listen"
            ):
                try:
                    st.audio(synthesize_speech(state.gujarati_info), format="audio/mp3")
                except Exception as e:
                    logger.warning(f"Audio generation failed: {str(e)}")
                    st.warning("🔊 Audio generation temporarily unavailable")

        st.markdown(f"<p class='disclaimer'>{DISCLAIMER}</p>", unsafe_allow_html=True)
