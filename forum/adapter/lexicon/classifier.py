"""Lexicon-based toxicity classifier.

Scores text by counting the distinct flagged terms it contains. Stands in for
a remote model: an optional delay simulates the network round-trip.
"""

import asyncio

from forum.config import ModerationSettings
from forum.domain.model.moderation import ToxicityResult
from forum.domain.service.moderation_service import ToxicityClassifier


class LexiconToxicityClassifier(ToxicityClassifier):
    """Case-insensitive substring match against a fixed lexicon.

    confidence = min(base + per_match * matches, max) when at least one
    term matches, the clean confidence otherwise.
    """

    def __init__(self, settings: ModerationSettings, latency_seconds: float = 0.0):
        """Initialize classifier.

        Args:
            settings: Lexicon, confidence constants and suggestion text
            latency_seconds: Simulated classification delay
        """
        self.lexicon = tuple(dict.fromkeys(term.lower() for term in settings.lexicon))
        self.settings = settings
        self.latency_seconds = latency_seconds

    def match(self, text: str) -> list[str]:
        """Distinct lexicon terms found in ``text``."""
        lowered = text.lower()
        return [term for term in self.lexicon if term in lowered]

    def score(self, text: str) -> ToxicityResult:
        """Synchronous verdict for ``text``."""
        matches = self.match(text)
        if not matches:
            return ToxicityResult(
                is_toxic=False,
                confidence=self.settings.clean_confidence,
                categories=[],
                suggestion=None,
            )

        confidence = min(
            self.settings.base_confidence
            + self.settings.per_match_confidence * len(matches),
            self.settings.max_confidence,
        )
        return ToxicityResult(
            is_toxic=True,
            # Rounded so 0.4 + 0.3 compares equal to 0.7
            confidence=round(confidence, 2),
            categories=list(self.settings.categories),
            suggestion=self.settings.suggestion,
        )

    async def classify(self, text: str) -> ToxicityResult:
        """Verdict for ``text`` after the simulated delay."""
        if self.latency_seconds:
            await asyncio.sleep(self.latency_seconds)
        return self.score(text)
