"""Runtime services shared across the editor (logging, spans)."""

from . import telemetry

__all__ = ["telemetry"]
