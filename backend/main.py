# main.py - FastAPI Backend for the Plant Health Analyzer
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel
import uvicorn
from datetime import datetime
import base64
import binascii
import logging
import time

from backend import __version__, settings
from backend.gemini import GeminiModel
from backend.prompts import ANALYSIS_PROMPT, TARGET_LANGUAGE, build_translation_prompt

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Plant Health Analyzer Backend",
    description="Gemini-powered plant health analysis with Gujarati translation",
    version=__version__
)

# Configure CORS to allow the Streamlit frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Global model variable
model = None


class AnalyzeRequest(BaseModel):
    mime_type: str
    data: str


class TranslateRequest(BaseModel):
    text: str


def load_model():
    """Configure the Gemini model"""
    global model
    if not settings.GEMINI_API_KEY:
        logger.error("GEMINI_API_KEY is not set; analysis endpoints will return 503")
        return False
    try:
        model = GeminiModel(settings.GEMINI_API_KEY, settings.GEMINI_MODEL)
        logger.info(f"Gemini model configured: {settings.GEMINI_MODEL}")
        return True
    except Exception as e:
        logger.error(f"Failed to configure Gemini model: {str(e)}")
        return False


def decode_image(data: str) -> bytes:
    """Decode base64 image data, accepting a full data URL as well"""
    if data.startswith("data:") and "," in data:
        data = data.split(",", 1)[1]
    try:
        image_bytes = base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise HTTPException(status_code=400, detail=f"Invalid base64 image data: {str(e)}")
    if not image_bytes:
        raise HTTPException(status_code=400, detail="Image data is empty")
    return image_bytes


def require_model():
    if model is None:
        raise HTTPException(status_code=503, detail="Gemini model not configured. Please check server logs.")
    return model


@app.on_event("startup")
async def startup_event():
    """Configure the model on startup"""
    logger.info("Starting Plant Health Analyzer Backend...")
    if not load_model():
        logger.error("Failed to configure model during startup")
    else:
        logger.info("Backend started successfully")


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "Plant Health Analyzer Backend",
        "version": __version__,
        "status": "online",
        "timestamp": datetime.now().isoformat(),
        "endpoints": {
            "health": "/health",
            "analyze": "/analyze",
            "translate": "/translate"
        }
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "model": settings.GEMINI_MODEL,
        "model_ready": model is not None
    }


@app.post("/analyze")
async def analyze_plant(request: AnalyzeRequest):
    """Analyze a base64 encoded plant image"""
    gemini = require_model()

    if not request.mime_type.startswith("image/"):
        raise HTTPException(status_code=400, detail=f"Unsupported content type: {request.mime_type}")

    image_bytes = decode_image(request.data)
    logger.info(f"Analyzing image: {len(image_bytes)} bytes ({request.mime_type})")

    start_time = time.time()
    try:
        text = await gemini.generate_text(ANALYSIS_PROMPT, image=image_bytes, mime_type=request.mime_type)
    except Exception as e:
        logger.error(f"Plant analysis failed: {str(e)}")
        raise HTTPException(status_code=502, detail=f"Plant analysis failed: {str(e)}")

    processing_time = time.time() - start_time
    logger.info(f"Analysis completed in {processing_time:.3f}s")
    return {
        "text": text,
        "model": settings.GEMINI_MODEL,
        "processing_time": round(processing_time, 3),
        "timestamp": datetime.now().isoformat()
    }


@app.post("/translate")
async def translate_analysis(request: TranslateRequest):
    """Translate an analysis to Gujarati"""
    gemini = require_model()

    if not request.text.strip():
        raise HTTPException(status_code=400, detail="No text provided")

    start_time = time.time()
    try:
        text = await gemini.generate_text(build_translation_prompt(request.text))
    except Exception as e:
        logger.error(f"Translation failed: {str(e)}")
        raise HTTPException(status_code=502, detail=f"Translation failed: {str(e)}")

    processing_time = time.time() - start_time
    logger.info(f"Translation to {TARGET_LANGUAGE} completed in {processing_time:.3f}s")
    return {
        "text": text,
        "language": TARGET_LANGUAGE,
        "model": settings.GEMINI_MODEL,
        "processing_time": round(processing_time, 3),
        "timestamp": datetime.now().isoformat()
    }


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler"""
    logger.error(f"Global exception: {str(exc)}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "error": str(exc),
            "timestamp": datetime.now().isoformat()
        }
    )


def run():
    uvicorn.run(
        "backend.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level=settings.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    run()
