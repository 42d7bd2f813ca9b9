from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Validating:
    pass


@dataclass(frozen=True)
class InFlight:
    pass


@dataclass(frozen=True)
class Success:
    audio_location: str


@dataclass(frozen=True)
class Error:
    message: str


RequestState: TypeAlias = Idle | Validating | InFlight | Success | Error
