"""Unit tests for PlaybackController."""
from __future__ import annotations

import unittest
from unittest.mock import MagicMock, call

from poetic_tts.application.errors import PlaybackError
from poetic_tts.application.playback_controller import PlaybackController


class TestPlaybackController(unittest.TestCase):
    """Test cases for PlaybackController."""

    def setUp(self):
        """Set up test fixtures."""
        self.sink = MagicMock()
        self.playback = PlaybackController(self.sink)

    def test_bind_stops_previous_then_plays(self):
        """Test that bind releases the old source before starting the new one."""
        self.playback.bind("https://host/a.mp3")

        self.assertEqual(
            self.sink.mock_calls,
            [
                call.stop(),
                call.set_source(None),
                call.set_source("https://host/a.mp3"),
                call.play(),
            ],
        )
        self.assertEqual(self.playback.current_source, "https://host/a.mp3")

    def test_new_bind_preempts_previous(self):
        """Test that a second bind stops the first sound."""
        self.playback.bind("https://host/a.mp3")
        self.sink.reset_mock()

        self.playback.bind("https://host/b.mp3")

        self.sink.stop.assert_called_once()
        self.assertEqual(self.playback.current_source, "https://host/b.mp3")

    def test_stop_releases_source(self):
        """Test that stop halts playback and drops the source."""
        self.playback.bind("https://host/a.mp3")

        self.playback.stop()

        self.assertIsNone(self.playback.current_source)
        self.sink.set_source.assert_called_with(None)

    def test_sink_failure_is_wrapped(self):
        """Test that sink errors surface as PlaybackError."""
        self.sink.play.side_effect = OSError("device busy")

        with self.assertRaises(PlaybackError) as ctx:
            self.playback.bind("https://host/a.mp3")

        self.assertIn("device busy", str(ctx.exception))
        self.assertIsNone(self.playback.current_source)

    def test_playback_error_passes_through(self):
        """Test that PlaybackError from the sink is not re-wrapped."""
        self.sink.set_source.side_effect = [None, PlaybackError("Invalid audio location: x")]

        with self.assertRaises(PlaybackError) as ctx:
            self.playback.bind("x")

        self.assertEqual(str(ctx.exception), "Invalid audio location: x")


if __name__ == "__main__":
    unittest.main()
