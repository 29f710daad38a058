"""Key-value extractor for the document extraction pipeline.

This module contains the KeyValueExtractor class that pulls
``Key: value`` pairs out of the leading lines of extracted text.
"""

import re
from typing import List, Optional, Pattern

from ..config import Config
from ..models import KeyValuePair

__all__ = ["KeyValueExtractor"]

KV_PATTERN: Pattern[str] = re.compile(Config.KV_PATTERN)


class KeyValueExtractor:
    """Regex-based key-value extractor for document headers.

    Only the first ``Config.MAX_KV_LINES`` lines are looked at. Each line
    is trimmed and matched against ``Config.KV_PATTERN``: a key of 2 to 60
    characters without a colon, a colon, optional whitespace and a
    non-empty value. Lines that do not match are skipped.
    """

    def extract(self, text: Optional[str]) -> List[KeyValuePair]:
        """Extract key-value pairs from the start of ``text``.

        Args:
            text: Full extracted text, possibly empty or None

        Returns:
            Key-value pairs in line order; empty when nothing matches
        """
        if not text or not text.strip():
            return []

        # lines past the limit are never inspected
        lines: List[str] = text.split("\n", Config.MAX_KV_LINES)[:Config.MAX_KV_LINES]

        pairs: List[KeyValuePair] = []
        for line in lines:
            pair = self._match_line(line)
            if pair is not None:
                pairs.append(pair)
        return pairs

    @staticmethod
    def _match_line(line: str) -> Optional[KeyValuePair]:
        match = KV_PATTERN.match(line.strip())
        if not match:
            return None

        key = match.group(1).strip()
        value = match.group(2).strip()
        if not Config.KV_KEY_MIN_LENGTH <= len(key) <= Config.KV_KEY_MAX_LENGTH or not value:
            return None
        return KeyValuePair(key=key, value=value)
