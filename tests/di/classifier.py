"""Mock classifier providers for testing."""

from dishka import Scope, provide

from forum.adapter.lexicon.classifier import LexiconToxicityClassifier
from forum.config import ModerationSettings
from forum.domain.service import ToxicityClassifier
from forum.util.di.infrastructure.classifier import ClassifierProvider


class MockClassifierProvider(ClassifierProvider):
    """Mock classifier provider: the lexicon without simulated latency."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_toxicity_classifier(self, settings: ModerationSettings) -> ToxicityClassifier:
        """Provide zero-latency classifier."""
        return LexiconToxicityClassifier(settings=settings)
