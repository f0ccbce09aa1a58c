"""Application ports package."""

from .clock import ClockPort

__all__ = ["ClockPort"]
