# -*- coding: utf-8 -*-
# -------- Bilingual UI Texts --------
UI_TEXTS = {
    "English": {
        "app_title": "Plant Health Analyzer",
        "app_subtitle": "Upload an image of your plant for health analysis and problem detection.",
        "consent": "I consent to the processing of my uploaded image by an AI service.",
        "upload_image": "Upload a plant image",
        "preview_caption": "Plant preview",
        "analyze_button": "Analyze Plant Health",
        "analyzing": "Analyzing...",
        "results_title": "Plant Analysis",
        "panel_title": "English",
        "listen": "Listen",
    },
    "Gujarati": {
        "app_title": "છોડ સ્વાસ્થ્ય વિશ્લેષક",
        "app_subtitle": "તમારા છોડની છબી અપલોડ કરો સ્વાસ્થ્ય વિશ્લેષણ અને સમસ્યા શોધ માટે.",
        "consent": "હું AI સેવા દ્વારા મારી અપલોડ કરેલી છબીની પ્રક્રિયા માટે સંમતિ આપું છું.",
        "upload_image": "છોડની છબી અપલોડ કરો",
        "preview_caption": "છોડનું પૂર્વાવલોકન",
        "analyze_button": "છોડનું સ્વાસ્થ્ય વિશ્લેષણ કરો",
        "analyzing": "વિશ્લેષણ કરી રહ્યું છે...",
        "results_title": "છોડનું વિશ્લેષણ",
        "panel_title": "ગુજરાતી",
        "listen": "સાંભળો",
    }
}

# -------- Sequencer Messages --------
CONSENT_REQUIRED = "Please provide consent to use the AI service before proceeding."
FILE_REQUIRED = "Please upload a file before proceeding."
ANALYSIS_ERROR = "Error analyzing plant health. Please try again."
ANALYSIS_ERROR_GUJARATI = "ભૂલ: છોડનું સ્વાસ્થ્ય વિશ્લેષણ કરવામાં નિષ્ફળ. કૃપા કરીને ફરી પ્રયાસ કરો."

DISCLAIMER = (
    "Note: This analysis is generated by an AI and may not be 100% accurate. "
    "For critical plant health issues, please consult a professional."
)


def bilingual(key, separator=" / "):
    """Join the English and Gujarati labels for a key"""
    return f"{UI_TEXTS['English'][key]}{separator}{UI_TEXTS['Gujarati'][key]}"
