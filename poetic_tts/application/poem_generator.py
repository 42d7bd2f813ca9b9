from __future__ import annotations

import random
from collections.abc import Sequence

SAMPLE_LINES: tuple[str, ...] = (
    "The morning spills gold across the roof of the world,",
    "A soft hush where day and night softly unfurl,",
    "Leaves whisper secrets only wind can keep,",
    "In the quiet place where memories sleep,",
    "Moonlight stitches silver seams on the sea,",
    "Every small moment folds into eternity.",
)

# One-click presets offered next to the text box.
QUICK_SAMPLES: tuple[str, ...] = SAMPLE_LINES[:3]

DEFAULT_LINE_COUNT = 3
SEPARATOR = " "


def pick_poem(
    lines: Sequence[str] = SAMPLE_LINES,
    count: int = DEFAULT_LINE_COUNT,
    *,
    rng: random.Random | None = None,
) -> str:
    """Join `count` distinct lines drawn at random without replacement.

    Lines keep the order in which they were drawn. A request for more lines
    than are available (or fewer than one) raises ValueError.
    """
    if count < 1:
        raise ValueError(f"count must be at least 1 (got {count}).")
    if count > len(lines):
        raise ValueError(
            f"count must not exceed the number of lines ({count} > {len(lines)})."
        )

    rng = rng or random.Random()
    drawn = rng.sample(list(lines), count)
    return SEPARATOR.join(drawn)
