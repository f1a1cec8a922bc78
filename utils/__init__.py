"""Utility modules for cross-cutting concerns."""

from utils.timezone import now_utc, today_utc, today_iso, to_utc, parse_iso
from utils.logging_config import setup_logging
