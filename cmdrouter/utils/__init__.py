"""Utility helpers exposed by cmdrouter."""

from . import logbook
from .paths import log_file, state_dir

__all__ = ["log_file", "logbook", "state_dir"]
