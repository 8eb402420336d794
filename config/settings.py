"""
Central configuration settings for the note publish synchronizer

This module provides centralized configuration management for the library
and the scenario replay CLI, eliminating hardcoded values.
"""

import os
from pathlib import Path
from typing import Optional

# ============================================================
# Project Structure
# ============================================================

PROJECT_ROOT = Path(__file__).parent.parent
DATA_DIR = PROJECT_ROOT / "data"

# Data subdirectories
SCENARIO_DIR = DATA_DIR / "scenarios"

# ============================================================
# Publish State Configuration
# ============================================================

# Seconds to wait for the sync service to confirm a publish request
PUBLISH_CONFIRMATION_TIMEOUT = 5.0

# Environment variable overriding PUBLISH_CONFIRMATION_TIMEOUT
PUBLISH_CONFIRMATION_TIMEOUT_ENV = "PUBLISH_CONFIRMATION_TIMEOUT"

# Display names for each publish state (Japanese)
PUBLISH_STATE_DISPLAY_NAMES = {
    "unpublished": "非公開",
    "publishing": "公開処理中",
    "published": "公開中",
    "unpublishing": "非公開処理中",
}

# ============================================================
# Scenario Configuration
# ============================================================

SCENARIO_FILE_SUFFIX = ".json"

# Event types accepted in a scenario file
SCENARIO_EVENT_TYPES = [
    "request",
    "update",
]

# Required fields per scenario entry
REQUIRED_SCENARIO_FIELDS = {
    "note": ["id"],
    "request": ["id", "published"],
    "update": ["id", "published"],
}

# ============================================================
# Helper Functions
# ============================================================


def get_confirmation_timeout() -> Optional[float]:
    """
    Get the confirmation timeout, honouring the environment override

    Returns:
        Timeout in seconds, or None when the override disables it ("0", "off", "none")

    Raises:
        ValueError: If the environment value is not a number
    """
    raw = os.getenv(PUBLISH_CONFIRMATION_TIMEOUT_ENV)
    if raw is None or raw.strip() == "":
        return PUBLISH_CONFIRMATION_TIMEOUT

    value = raw.strip().lower()
    if value in ("off", "none"):
        return None

    try:
        timeout = float(value)
    except ValueError:
        raise ValueError(f"Invalid {PUBLISH_CONFIRMATION_TIMEOUT_ENV}: {raw}")

    if timeout < 0:
        raise ValueError(f"Invalid {PUBLISH_CONFIRMATION_TIMEOUT_ENV}: {raw}")
    return timeout or None


def get_publish_state_display_name(state: str) -> str:
    """
    Get the display name (Japanese) for a publish state

    Args:
        state: State name ('unpublished', 'publishing', 'published', 'unpublishing')

    Returns:
        Display name in Japanese

    Raises:
        ValueError: If state is invalid
    """
    if state not in PUBLISH_STATE_DISPLAY_NAMES:
        raise ValueError(f"Unknown publish state: {state}")
    return PUBLISH_STATE_DISPLAY_NAMES[state]


def get_scenario_file_path(name: str) -> Path:
    """
    Resolve a scenario name or path to a file path

    Args:
        name: Existing file path, or a bare scenario name looked up in SCENARIO_DIR

    Returns:
        Path object pointing to the scenario file
    """
    path = Path(name)
    if path.exists() or path.suffix == SCENARIO_FILE_SUFFIX or len(path.parts) > 1:
        return path
    return SCENARIO_DIR / f"{name}{SCENARIO_FILE_SUFFIX}"
