"""
Simulation module for the Room Comfort Monitor.

This module contains the per-room reading profiles and the simulator that
stands in for real sensor hardware.
"""

from .reading_simulator import ReadingSimulator
from .room_profiles import ROOM_PROFILES, profile_for_room

__all__ = ['ReadingSimulator', 'ROOM_PROFILES', 'profile_for_room']
