"""Application layer - use cases exposed to the user interface."""

from rail_schedule.application.services import RailwayService

__all__ = ["RailwayService"]
