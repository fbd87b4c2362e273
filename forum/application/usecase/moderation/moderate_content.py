"""Moderate content use case."""

from pydantic import BaseModel

from forum.domain.model.moderation import GateDecision
from forum.domain.service import ModerationService


class ModerateContentRequest(BaseModel):
    """Moderate content request."""

    text: str


class ModerateContentResponse(BaseModel):
    """Moderate content response."""

    decision: GateDecision


class ModerateContentUseCase:
    """Use case for previewing the gate decision without writing anything."""

    def __init__(self, moderation_service: ModerationService) -> None:
        """Initialize moderate content use case.

        Args:
            moderation_service: Moderation gate
        """
        self.moderation_service = moderation_service

    async def execute(self, request: ModerateContentRequest) -> ModerateContentResponse:
        """Execute moderate content flow.

        Args:
            request: Text to moderate

        Returns:
            Gate decision with the classifier verdict
        """
        decision = await self.moderation_service.moderate(request.text)
        return ModerateContentResponse(decision=decision)
