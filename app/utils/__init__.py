"""Utility helpers for reusable functionality."""

from .datetime import ensure_utc, now_utc, truncate_text

__all__ = ["ensure_utc", "now_utc", "truncate_text"]
