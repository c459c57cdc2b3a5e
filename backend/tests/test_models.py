"""Tests for parsing Firestore documents."""
import unittest
from unittest.mock import MagicMock

from vaner.models import Device, NotificationPreference, User


def snapshot(doc_id: str, data) -> MagicMock:
    snap = MagicMock()
    snap.id = doc_id
    snap.to_dict.return_value = data
    return snap


class TestUser(unittest.TestCase):
    """Tests for User.from_snapshot."""
    
    def test_parses_notification_map(self) -> None:
        """The nested notification map becomes a NotificationPreference."""
        user = User.from_snapshot(snapshot("U1", {"notification": {"enabled": True, "minuteOfDay": 482}}))
        self.assertEqual(user.id, "U1")
        self.assertEqual(user.notification, NotificationPreference(enabled=True, minute_of_day=482))
    
    def test_missing_notification_is_disabled(self) -> None:
        """A user without a notification map is treated as opted out."""
        user = User.from_snapshot(snapshot("U1", None))
        self.assertFalse(user.notification.enabled)
        self.assertIsNone(user.notification.minute_of_day)
    
    def test_non_integer_minute_ignored(self) -> None:
        """A malformed minuteOfDay is dropped."""
        pref = NotificationPreference.from_dict({"enabled": "yes", "minuteOfDay": "482"})
        self.assertFalse(pref.enabled)
        self.assertIsNone(pref.minute_of_day)


class TestDevice(unittest.TestCase):
    """Tests for Device."""
    
    def test_deliverable_needs_enabled_and_token(self) -> None:
        """Only enabled devices with a non-empty token are deliverable."""
        self.assertTrue(Device(id="a", enabled=True, token="A").is_deliverable)
        self.assertFalse(Device(id="b", enabled=False, token="B").is_deliverable)
        self.assertFalse(Device(id="c", enabled=True, token="").is_deliverable)
        self.assertFalse(Device(id="d", enabled=True, token=None).is_deliverable)
    
    def test_from_snapshot(self) -> None:
        """enabled and token are read from the document."""
        device = Device.from_snapshot(snapshot("d1", {"enabled": True, "token": "A", "platform": "android"}))
        self.assertEqual(device, Device(id="d1", enabled=True, token="A"))
    
    def test_non_string_token_ignored(self) -> None:
        """A token stored with the wrong type is treated as missing."""
        device = Device.from_snapshot(snapshot("d1", {"enabled": True, "token": 123}))
        self.assertIsNone(device.token)
        self.assertFalse(device.is_deliverable)


if __name__ == "__main__":
    unittest.main()
