import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()


class Config:
    BASE_DIR = Path(__file__).resolve().parent.parent
    DATA_DIR = Path(os.getenv("DATA_DIR", BASE_DIR / "data"))
    UPLOAD_DIR = Path(os.getenv("UPLOAD_DIR", BASE_DIR / "uploads"))
    FRONTEND_DIR = Path(os.getenv("FRONTEND_DIR", BASE_DIR / "dist"))
    MAX_UPLOAD_BYTES = 5 * 1024 * 1024
    # Request-level cap: one upload plus room for the multipart framing
    MAX_CONTENT_LENGTH = MAX_UPLOAD_BYTES + 64 * 1024
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


class DevConfig(Config):
    DEBUG = True


class ProdConfig(Config):
    DEBUG = False
