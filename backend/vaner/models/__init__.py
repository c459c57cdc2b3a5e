"""Firestore document models."""
from .user import User, NotificationPreference
from .device import Device

__all__ = ["User", "NotificationPreference", "Device"]
