"""Moderation gate domain service."""

from abc import ABC, abstractmethod

import logfire

from forum.config import ModerationSettings
from forum.domain.model.moderation import GateDecision, ToxicityResult
from forum.domain.value import ModerationAction

from .base import Service


class ToxicityClassifier(ABC):
    """Capability that scores text for toxicity.

    Implementations may suspend (e.g. a remote model) but must not hold
    shared mutable state between calls.
    """

    @abstractmethod
    async def classify(self, text: str) -> ToxicityResult:
        """Classify ``text``.

        Args:
            text: Text to score

        Returns:
            Toxicity verdict
        """
        pass


class ModerationService(Service):
    """Three-way moderation gate (allow / warn / block) over a classifier.

    The gate never touches the store. Callers must withhold the write on
    block and may surface the message on warn.
    """

    def __init__(
        self, classifier: ToxicityClassifier, settings: ModerationSettings
    ) -> None:
        """Initialize moderation service.

        Args:
            classifier: Toxicity classifier
            settings: Moderation thresholds and messages
        """
        self.classifier = classifier
        self.settings = settings
        self._in_flight = 0

    @property
    def is_checking(self) -> bool:
        """True while any classification is in flight (UI busy indicator only)."""
        return self._in_flight > 0

    async def check_toxicity(self, text: str) -> ToxicityResult:
        """Run the classifier on ``text``.

        Args:
            text: Text to score

        Returns:
            Raw classifier verdict
        """
        self._in_flight += 1
        try:
            return await self.classifier.classify(text)
        finally:
            self._in_flight -= 1

    async def moderate(self, text: str) -> GateDecision:
        """Decide whether ``text`` may be admitted.

        Args:
            text: Comment text

        Returns:
            Gate decision with the underlying verdict
        """
        with logfire.span("moderation_service.moderate", text_length=len(text)):
            result = await self.check_toxicity(text)
            decision = self.decide(result)

            if decision.action == ModerationAction.BLOCK:
                logfire.warn(
                    "Content blocked",
                    confidence=result.confidence,
                    categories=result.categories,
                )
            elif decision.action == ModerationAction.WARN:
                logfire.info("Content admitted with warning", confidence=result.confidence)
            else:
                logfire.debug("Content allowed", confidence=result.confidence)

            return decision

    def decide(self, result: ToxicityResult) -> GateDecision:
        """Map a verdict to a gate decision.

        Args:
            result: Classifier verdict

        Returns:
            Block above the block threshold, warn above the warn threshold,
            allow otherwise. Only toxic verdicts can block or warn.
        """
        if result.is_toxic and result.confidence > self.settings.block_threshold:
            return GateDecision(
                action=ModerationAction.BLOCK,
                result=result,
                message=result.suggestion or self.settings.block_message,
            )
        if result.is_toxic and result.confidence > self.settings.warn_threshold:
            return GateDecision(
                action=ModerationAction.WARN,
                result=result,
                message=self.settings.warn_message,
            )
        return GateDecision(action=ModerationAction.ALLOW, result=result)
