"""Centralised environment loading for the salesreport package."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

_ENV_LOADED = False


def load_environment(dotenv_path: Optional[Path] = None) -> None:
    """Load environment variables once for the entire process."""

    global _ENV_LOADED
    if _ENV_LOADED:
        return
    load_dotenv(dotenv_path)
    _ENV_LOADED = True


def env_default(name: str, fallback: str) -> str:
    """Return ``name`` from the environment, or ``fallback`` when unset or empty."""

    load_environment()
    return os.getenv(name) or fallback
