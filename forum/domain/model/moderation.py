"""Moderation results and gate decisions."""

from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import ModerationAction


class ToxicityResult(DomainModel):
    """Classifier verdict for a piece of text.

    ``is_toxic`` is true iff at least one flagged term matched.
    """

    is_toxic: bool
    confidence: float = Field(ge=0, le=1)
    categories: list[str] = Field(default_factory=list)
    suggestion: Optional[str] = None


class GateDecision(DomainModel):
    """Moderation gate decision.

    Block withholds the comment; warn admits it with an advisory.
    """

    action: ModerationAction
    result: ToxicityResult
    message: Optional[str] = None

    @property
    def admitted(self) -> bool:
        """Whether the content may be written to the store."""
        return self.action != ModerationAction.BLOCK
