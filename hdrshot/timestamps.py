"""Timestamps for file names."""

from __future__ import annotations

from datetime import datetime
from typing import Optional


def format_timestamp_for_filename(when: Optional[datetime] = None) -> str:
    """Format ``when`` (local now by default) as ``yyyy-MM-dd_HH-mm-ss``."""
    moment = when if when is not None else datetime.now()
    return moment.strftime("%Y-%m-%d_%H-%M-%S")