"""Toxicity classifier infrastructure providers."""

from dishka import Scope, provide

from forum.adapter.lexicon.classifier import LexiconToxicityClassifier
from forum.config import ModerationSettings
from forum.domain.service import ToxicityClassifier
from forum.util.di.base import ProviderBase


class ClassifierProvider(ProviderBase):
    """Classifier component base."""

    __mock_component__ = "classifier"


class ProdClassifierProvider(ClassifierProvider):
    """Production classifier provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_toxicity_classifier(self, settings: ModerationSettings) -> ToxicityClassifier:
        """Provide toxicity classifier.

        Returns:
            Lexicon classifier with the configured simulated latency
        """
        return LexiconToxicityClassifier(
            settings=settings,
            latency_seconds=settings.classifier_latency_seconds,
        )
