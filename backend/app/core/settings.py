import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

DEFAULT_DIFFICULTY_CONFIG = str(Path(__file__).resolve().parents[2] / "config" / "difficulty.yaml")

DIFFICULTY_CONFIG_PATH = os.getenv("DIFFICULTY_CONFIG_PATH", DEFAULT_DIFFICULTY_CONFIG)

# Wall-clock budget for one AI move, in seconds. 0 disables the timeout.
AI_MOVE_TIMEOUT = float(os.getenv("AI_MOVE_TIMEOUT", "5.0"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Allow Vite (5173) and React default (3000)
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000").split(",")
    if origin.strip()
]
