"""Adapter implementations for sinks and clocks."""

from __future__ import annotations

from .clock import SystemClock
from .sinks import ConsoleSink, ProcessSink

__all__ = ["ConsoleSink", "ProcessSink", "SystemClock"]
