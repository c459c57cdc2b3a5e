"""Tests for the FCM push sender."""
import unittest
from unittest.mock import MagicMock, patch

from vaner.services.push_sender import PushMessage, PushResult, PushSenderService


class TestPushMessage(unittest.TestCase):
    """Tests for PushMessage."""
    
    def test_requires_tokens(self) -> None:
        """An empty token list is rejected."""
        with self.assertRaises(ValueError):
            PushMessage(title="Vaner", body="Hi", tokens=[])
    
    def test_to_multicast(self) -> None:
        """Builds a MulticastMessage with notification, string data and tokens."""
        message = PushMessage(title="Vaner", body="Husk", data={"userId": "U1", "n": 3}, tokens=["A", "B"])
        multicast = message.to_multicast()
        
        self.assertEqual(multicast.tokens, ["A", "B"])
        self.assertEqual(multicast.notification.title, "Vaner")
        self.assertEqual(multicast.notification.body, "Husk")
        self.assertEqual(multicast.data, {"userId": "U1", "n": "3"})


class TestPushSenderService(unittest.IsolatedAsyncioTestCase):
    """Tests for PushSenderService.send_multicast."""
    
    def setUp(self) -> None:
        """Build a message to send."""
        self.message = PushMessage(title="Vaner", body="Husk", data={"userId": "U1"}, tokens=["A", "B"])
    
    @patch("vaner.services.push_sender.messaging.send_each_for_multicast")
    async def test_returns_gateway_counts(self, mock_send: MagicMock) -> None:
        """Success and failure counts come straight from the batch response."""
        mock_send.return_value = MagicMock(
            success_count=1,
            failure_count=1,
            responses=[MagicMock(success=True), MagicMock(success=False, exception="unregistered")],
        )
        
        result = await PushSenderService().send_multicast(self.message)
        
        self.assertEqual(result, PushResult(success_count=1, failure_count=1))
        mock_send.assert_called_once()
        sent = mock_send.call_args.args[0]
        self.assertEqual(sent.tokens, ["A", "B"])
        self.assertFalse(mock_send.call_args.kwargs["dry_run"])
    
    @patch("vaner.services.push_sender.messaging.send_each_for_multicast")
    async def test_dry_run_passed_through(self, mock_send: MagicMock) -> None:
        """dry_run is forwarded to firebase-admin."""
        mock_send.return_value = MagicMock(success_count=2, failure_count=0, responses=[])
        await PushSenderService(dry_run=True).send_multicast(self.message)
        self.assertTrue(mock_send.call_args.kwargs["dry_run"])
    
    @patch("vaner.services.push_sender.messaging.send_each_for_multicast")
    async def test_transport_errors_propagate(self, mock_send: MagicMock) -> None:
        """Errors for the call as a whole reach the caller."""
        mock_send.side_effect = ConnectionError("unreachable")
        with self.assertRaises(ConnectionError):
            await PushSenderService().send_multicast(self.message)


if __name__ == "__main__":
    unittest.main()
