from __future__ import annotations
from pathlib import Path

APP_NAME = "pocket-notes"
APP_ORG = "pocket-notes"

APP_HOME = Path.home() / f".{APP_NAME}"
DATA_DIR = APP_HOME / "data"
LOG_DIR = APP_HOME / "logs"
LOG_PATH = LOG_DIR / f"{APP_NAME}.log"

# единственный ключ, под которым лежит вся коллекция
NOTES_KEY = "notes"

WINDOW_SIZE = (480, 720)
