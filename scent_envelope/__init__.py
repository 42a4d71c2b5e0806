"""
K9 Scent Envelope Planning

Estimates where airborne scent from a last known position has likely
traveled, given elapsed time, wind and weather/terrain conditions, and
builds the geometry for a directional cone overlay.
"""

__version__ = "0.1.0"

from .core import *
