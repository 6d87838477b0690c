"""Data access objects for the track store."""

from .track_dao import TrackDAO

__all__ = ["TrackDAO"]
