# interest_calculator/config.py

import os

# --- General Configuration ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
DEBUG = os.getenv("FLASK_DEBUG", "0") in ("1", "true", "True")
PORT = int(os.getenv("PORT", "5000"))

# --- Frontend origins allowed to call /api/* ---
# Comma separated, e.g. "http://localhost:5173,http://127.0.0.1:5173"
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000,http://localhost:5173,http://127.0.0.1:3000,http://127.0.0.1:5173",
    ).split(",")
    if origin.strip()
]

# --- Calculator defaults ---
DEFAULT_CURRENCY = os.getenv("DEFAULT_CURRENCY", "USD")
