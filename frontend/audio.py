# audio.py - Text to speech for the translated analysis
import io

from gtts import gTTS

GUJARATI_LANG_CODE = "gu"


def synthesize_speech(text, lang=GUJARATI_LANG_CODE):
    """Return MP3 bytes reading the text aloud"""
    tts = gTTS(text, lang=lang)
    audio_buffer = io.BytesIO()
    tts.write_to_fp(audio_buffer)
    audio_buffer.seek(0)
    return audio_buffer.read()
