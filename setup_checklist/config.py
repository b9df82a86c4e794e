# -*- coding: utf-8 -*-
"""
Root config for the setup checklist. Values can be overridden through the
environment (or a .env file loaded by setup_checklist.main).

Storage and logs live in a per-user data directory (~/.setup_checklist by
default, CHECKLIST_HOME to override), never next to the installed package.
"""

import os
from pathlib import Path
from typing import Optional

DATA_DIR_NAME = ".setup_checklist"

DEFAULT_API_TIMEOUT: float = 10.0 # seconds
STORAGE_FILE_NAME = "client_storage.json"


def get_data_root() -> Path:
    """Get the per-user directory holding the workspace and logs"""
    value = os.getenv("CHECKLIST_HOME")
    if value:
        return Path(value).expanduser()
    return Path.home() / DATA_DIR_NAME


def get_workspace_root() -> Path:
    return get_data_root() / "workspace"


def get_logs_dir() -> Path:
    return get_data_root() / "logs"


def get_default_storage_file() -> Path:
    return get_workspace_root() / STORAGE_FILE_NAME


def get_api_url() -> Optional[str]:
    """Backend base URL; None means the static (offline) provider is used."""
    value = os.getenv("CHECKLIST_API_URL", "").strip()
    return value.rstrip("/") or None


def get_user_id() -> Optional[str]:
    return os.getenv("CHECKLIST_USER_ID") or None


def get_api_token() -> Optional[str]:
    return os.getenv("CHECKLIST_API_TOKEN") or None


def get_api_timeout() -> float:
    try:
        return float(os.getenv("CHECKLIST_API_TIMEOUT", str(DEFAULT_API_TIMEOUT)))
    except ValueError:
        return DEFAULT_API_TIMEOUT


def get_storage_file() -> Path:
    value = os.getenv("CHECKLIST_STORAGE_FILE")
    return Path(value).expanduser() if value else get_default_storage_file()


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "DEBUG").upper()
