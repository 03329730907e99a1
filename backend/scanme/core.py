import logging
import os
from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

MAX_FILE_MB = 10
MAX_FILE_BYTES = MAX_FILE_MB * 1024 * 1024

MAX_PROMPT_CHARS = 4500
MIN_TEXT_CHARS = 50

DEFAULT_MODEL = "gemini-2.0-flash"
DEFAULT_PORT = 3001
DEFAULT_CORS_ORIGINS = ["http://localhost:5173", "https://scanme.vercel.app"]

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class Settings:
    gemini_api_key: str = ""
    gemini_model: str = DEFAULT_MODEL
    port: int = DEFAULT_PORT
    cors_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    temp_dir: str = "temp"
    log_level: str = "INFO"
    max_file_bytes: int = MAX_FILE_BYTES

    @classmethod
    def from_env(cls) -> "Settings":
        """Read configuration once at process start (.env first, then the environment)."""
        load_dotenv()
        origins = os.getenv("CORS_ORIGINS")
        return cls(
            gemini_api_key=os.getenv("GEMINI_API_KEY", ""),
            gemini_model=os.getenv("GEMINI_MODEL", DEFAULT_MODEL),
            port=int(os.getenv("PORT", DEFAULT_PORT)),
            cors_origins=(
                [o.strip() for o in origins.split(",") if o.strip()]
                if origins
                else list(DEFAULT_CORS_ORIGINS)
            ),
            temp_dir=os.getenv("UPLOAD_TEMP_DIR", "temp"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


def configure_logging(level: str = "INFO"):
    logging.basicConfig(level=level, format=LOG_FORMAT)


class HealthResponse(BaseModel):
    status: str = "ok"
    message: str = "Server is running"


class ErrorResponse(BaseModel):
    error: str
    message: Optional[str] = None


class CategoryScores(BaseModel):
    atsCompatibility: Optional[float] = None
    workExperience: Optional[float] = None
    content: Optional[float] = None
    formatting: Optional[float] = None
    skills: Optional[float] = None
    keywords: Optional[float] = None


class AnalysisResult(BaseModel):
    # Documentation only: model output is returned as-is, never validated.
    model_config = ConfigDict(extra="allow")

    overallScore: Optional[float] = None
    categoryScores: Optional[CategoryScores] = None
    strengths: List[str] = []
    improvements: List[str] = []
    suggestions: List[str] = []
    feedback: Optional[str] = None


FALLBACK_RESULT: Dict[str, Any] = {
    "overallScore": 75,
    "score": 75,
    "strengths": [
        "Resume uploaded successfully",
        "Content extracted from document",
        "Ready for detailed analysis",
    ],
    "improvements": [
        "Add more quantifiable achievements",
        "Include relevant keywords for ATS",
        "Improve formatting for better readability",
    ],
    "summary": "Resume analyzed. Consider the suggestions above for improvements.",
}
