"""
Paths configuration

Centralized directory paths for the application.
"""

import os
from pathlib import Path

# Base directories
APP_DIR = Path(__file__).parent.parent
BACKEND_DIR = APP_DIR.parent
OUTPUT_DIR = Path(os.getenv("OUTPUT_DIR", str(BACKEND_DIR / "outputs")))
PROJECT_DATA_DIR = Path(os.getenv("PROJECT_DATA_DIR", str(BACKEND_DIR / "project_data")))

# Prefix under which OUTPUT_DIR is served
PUBLIC_OUTPUT_URL = os.getenv("PUBLIC_OUTPUT_URL", "/outputs").rstrip("/")

__all__ = ["APP_DIR", "BACKEND_DIR", "OUTPUT_DIR", "PROJECT_DATA_DIR", "PUBLIC_OUTPUT_URL"]
