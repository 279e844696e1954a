"""Core utilities for the web application."""

from .context import get_candidate_source, get_ranker
from .heartbeat import heartbeat, touch_liveness_file

__all__ = ["get_candidate_source", "get_ranker", "heartbeat", "touch_liveness_file"]
