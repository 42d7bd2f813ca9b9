from __future__ import annotations

import argparse

from poetic_tts.application.poem_generator import DEFAULT_LINE_COUNT
from poetic_tts.domain.vo.voice import Voice


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="poetic-tts",
        description="Speak a line of text (or a generated poem) through the synthesis service.",
    )
    parser.add_argument(
        "text",
        nargs="?",
        help="Text to speak. Ignored with --poem.",
    )
    parser.add_argument(
        "--voice",
        default=None,
        choices=[v.value for v in Voice],
        help="Voice to use (default: POETIC_TTS_DEFAULT_VOICE or the first voice).",
    )
    parser.add_argument(
        "--poem",
        action="store_true",
        help="Speak a randomly generated poem instead of TEXT.",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=DEFAULT_LINE_COUNT,
        help=f"Number of poem lines with --poem (default: {DEFAULT_LINE_COUNT}).",
    )
    parser.add_argument(
        "--play",
        action="store_true",
        help="Play the synthesized audio before exiting (needs Qt Multimedia).",
    )
    parser.add_argument(
        "--gui",
        action="store_true",
        help="Open the desktop window instead of speaking once.",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to .env file (default: .env). Use empty to disable.",
    )
    return parser.parse_args(argv)
