"""
FCE Report Service - Configuration
==================================
Centralised settings for logging, report output and the API version.
Loads overrides from the project-level .env file.

Classification and norm rules are compiled into the package and are not
configurable here.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# ── Paths ───────────────────────────────────────────────────────────────
PROJECT_ROOT = Path(__file__).resolve().parent.parent

# ── Load .env ───────────────────────────────────────────────────────────
load_dotenv(PROJECT_ROOT / ".env")

LOG_LEVEL: str = os.getenv("FCE_LOG_LEVEL", "INFO")
LOG_FILE: str = os.getenv("FCE_LOG_FILE", "")                 # empty = console only
REPORT_DIR: str = os.getenv("FCE_REPORT_DIR", "reports")

# ── API ─────────────────────────────────────────────────────────────────
API_TITLE = "FCE Test Classification API"
API_VERSION = "1.0.0"
