from __future__ import annotations

from enum import Enum


class Voice(str, Enum):
    JOANNA = "Joanna"
    MATTHEW = "Matthew"
    AMY = "Amy"
    IVY = "Ivy"
    JUSTIN = "Justin"
    KENDRA = "Kendra"
    STEPHEN = "Stephen"
    ADITI = "Aditi"

    @classmethod
    def default(cls) -> "Voice":
        return next(iter(cls))

    @classmethod
    def parse(cls, value: "str | Voice") -> "Voice":
        """Resolve a voice identifier (case-insensitive).

        Raises ValueError for identifiers outside the supported set.
        """
        if isinstance(value, Voice):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Voice must be a string identifier (got {type(value).__name__}).")

        normalized = value.strip().lower()
        for voice in cls:
            if voice.value.lower() == normalized:
                return voice
        supported = ", ".join(v.value for v in cls)
        raise ValueError(f"Unsupported voice '{value}'. Choose one of: {supported}.")
