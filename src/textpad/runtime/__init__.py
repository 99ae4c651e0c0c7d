"""Runtime services shared by the document core and the adapters."""

from . import telemetry

__all__ = ["telemetry"]
