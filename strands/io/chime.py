"""Audible cue played when a word is fully placed."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

BELL = "\a"


class CompletionChime:
    """Ring the terminal bell when a word completes.

    Used as the placement engine's completion callback. The cue is best
    effort: a broken or closed stream is logged and otherwise ignored.
    """

    def __init__(self, enabled: bool = True, stream: Optional[TextIO] = None) -> None:
        self.enabled = enabled
        self.stream = stream
        self.played = 0

    def __call__(self, word_id: str, word_text: str) -> None:
        LOGGER.info("Word complete: %s", word_text)
        if not self.enabled:
            return
        stream = self.stream or sys.stdout
        try:
            stream.write(BELL)
            stream.flush()
        except (OSError, ValueError) as exc:
            LOGGER.warning("Completion chime unavailable: %s", exc)
            return
        self.played += 1
