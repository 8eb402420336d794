"""
Configuration module for the note publish synchronizer

This module provides centralized configuration management for the library and CLI.
"""

from .settings import (
    # Paths
    PROJECT_ROOT,
    DATA_DIR,
    SCENARIO_DIR,
    # Publish state settings
    PUBLISH_CONFIRMATION_TIMEOUT,
    PUBLISH_CONFIRMATION_TIMEOUT_ENV,
    PUBLISH_STATE_DISPLAY_NAMES,
    # Scenario settings
    SCENARIO_FILE_SUFFIX,
    SCENARIO_EVENT_TYPES,
    REQUIRED_SCENARIO_FIELDS,
    # Helper functions
    get_confirmation_timeout,
    get_publish_state_display_name,
    get_scenario_file_path,
)

__all__ = [
    # Paths
    "PROJECT_ROOT",
    "DATA_DIR",
    "SCENARIO_DIR",
    # Publish state settings
    "PUBLISH_CONFIRMATION_TIMEOUT",
    "PUBLISH_CONFIRMATION_TIMEOUT_ENV",
    "PUBLISH_STATE_DISPLAY_NAMES",
    # Scenario settings
    "SCENARIO_FILE_SUFFIX",
    "SCENARIO_EVENT_TYPES",
    "REQUIRED_SCENARIO_FIELDS",
    # Helper functions
    "get_confirmation_timeout",
    "get_publish_state_display_name",
    "get_scenario_file_path",
]
