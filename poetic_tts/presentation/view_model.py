from __future__ import annotations

import html
from dataclasses import dataclass

from poetic_tts.application.poem_generator import QUICK_SAMPLES
from poetic_tts.application.request_controller import SessionSnapshot
from poetic_tts.domain.vo.voice import Voice

SPEAK_LABEL = "🔊 Speak"
SPEAK_BUSY_LABEL = "🔄 Generating..."
NO_AUDIO_LABEL = "—"


@dataclass(frozen=True)
class ViewModel:
    text: str
    voice: str
    voices: tuple[str, ...]
    status: str
    speak_label: str
    speak_enabled: bool
    last_audio_url: str | None
    last_audio_html: str
    quick_samples: tuple[str, ...]


def project(snapshot: SessionSnapshot) -> ViewModel:
    """Render a session snapshot into what the window shows. No side effects."""
    busy = snapshot.is_busy
    url = snapshot.audio_handle
    return ViewModel(
        text=snapshot.text,
        voice=snapshot.voice.value,
        voices=tuple(v.value for v in Voice),
        status=snapshot.status,
        speak_label=SPEAK_BUSY_LABEL if busy else SPEAK_LABEL,
        speak_enabled=not busy,
        last_audio_url=url,
        last_audio_html=f'Last generated audio: <a href="{html.escape(url, quote=True)}">Open</a>'
        if url
        else f"Last generated audio: {NO_AUDIO_LABEL}",
        quick_samples=QUICK_SAMPLES,
    )
