import os
from typing import List
from dotenv import load_dotenv

# Load environment variables from .env if present
load_dotenv()

HOST = os.getenv("MINIMAX_HOST", "127.0.0.1")
PORT = int(os.getenv("MINIMAX_PORT", "8000"))
LOG_LEVEL = os.getenv("MINIMAX_LOG_LEVEL", "info").lower()


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


# Comma separated list, "*" allows every origin
CORS_ORIGINS = _split_origins(os.getenv("MINIMAX_CORS_ORIGINS", "*"))
