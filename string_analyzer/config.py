import os
from dotenv import load_dotenv

load_dotenv()

# ------------------------------------------------------------------------------
# PERSISTENCE
# ------------------------------------------------------------------------------

# Empty string disables snapshotting entirely (in-memory only)
DATA_FILE = os.getenv("STRINGS_DATA_FILE", "strings.json")

# ------------------------------------------------------------------------------
# SERVER
# ------------------------------------------------------------------------------

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8000))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]
