# config.py
import os
from pathlib import Path

from dotenv import load_dotenv

# .env next to this file, if present; real env vars win
load_dotenv(dotenv_path=Path(__file__).resolve().parent / ".env")


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "change-me")  # set via env var in prod
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///binsort.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    DEFAULT_REGION = os.getenv("BINSORT_DEFAULT_REGION", "US")
    CONFIDENCE_THRESHOLD = float(os.getenv("BINSORT_CONFIDENCE_THRESHOLD", "0.8"))

    MODEL_STATE_PATH = os.getenv("BINSORT_MODEL_PATH", "best_efficientnet_model.pth")
    CLASS_NAMES_PATH = os.getenv("BINSORT_CLASS_NAMES_PATH", "artifacts/class_names.json")

    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
    GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")

    LEADERBOARD_LIMIT = int(os.getenv("BINSORT_LEADERBOARD_LIMIT", "100"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
