"""Tests for the command-line entry point (headless path)."""
from __future__ import annotations

import io
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import patch

from poetic_tts.application.errors import NetworkError
from poetic_tts.main import main

ENV = {"POETIC_TTS_API_BASE": "http://tts.local"}


class TestMain(unittest.TestCase):
    """Test cases for main."""

    def _run(self, argv):
        stdout, stderr = io.StringIO(), io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            code = main(argv)
        return code, stdout.getvalue(), stderr.getvalue()

    def test_missing_config_exits_with_2(self):
        with patch.dict("os.environ", {}, clear=True):
            code, _, err = self._run(["hi", "--env-file", ""])
        self.assertEqual(code, 2)
        self.assertIn("Config error", err)

    @patch("poetic_tts.di_container.HttpSynthesisClient")
    def test_speak_prints_audio_location(self, client_cls):
        client_cls.return_value.synthesize.return_value = "https://host/a.mp3"
        with patch.dict("os.environ", ENV, clear=True):
            code, out, err = self._run(["hi", "--voice", "Amy", "--env-file", ""])

        self.assertEqual(code, 0)
        self.assertIn("https://host/a.mp3", out)
        self.assertIn("Audio available at https://host/a.mp3", err)
        client_cls.return_value.synthesize.assert_called_once_with("hi", "Amy")

    @patch("poetic_tts.di_container.HttpSynthesisClient")
    def test_blank_text_exits_with_2(self, client_cls):
        with patch.dict("os.environ", ENV, clear=True):
            code, _, _ = self._run(["   ", "--env-file", ""])

        self.assertEqual(code, 2)
        client_cls.return_value.synthesize.assert_not_called()

    @patch("poetic_tts.di_container.HttpSynthesisClient")
    def test_network_error_exits_with_5(self, client_cls):
        client_cls.return_value.synthesize.side_effect = NetworkError("bad voice")
        with patch.dict("os.environ", ENV, clear=True):
            code, _, err = self._run(["hi", "--env-file", ""])

        self.assertEqual(code, 5)
        self.assertIn("Error: bad voice", err)

    @patch("poetic_tts.di_container.HttpSynthesisClient")
    def test_poem_with_impossible_count_exits_with_2(self, client_cls):
        with patch.dict("os.environ", ENV, clear=True):
            code, _, err = self._run(["--poem", "--count", "99", "--env-file", ""])

        self.assertEqual(code, 2)
        self.assertIn("Input error", err)
        client_cls.return_value.synthesize.assert_not_called()


if __name__ == "__main__":
    unittest.main()
