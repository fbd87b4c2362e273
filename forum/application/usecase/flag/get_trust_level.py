"""Get trust level use case."""

from pydantic import BaseModel

from forum.domain.model.flag import UserTrustLevel
from forum.domain.service import FlagService


class GetTrustLevelRequest(BaseModel):
    """Get trust level request."""

    user_id: str


class GetTrustLevelResponse(BaseModel):
    """Get trust level response."""

    trust: UserTrustLevel
    can_moderate: bool


class GetTrustLevelUseCase:
    """Use case for reading a user's trust record and moderation rights."""

    def __init__(self, flag_service: FlagService) -> None:
        self.flag_service = flag_service

    async def execute(self, request: GetTrustLevelRequest) -> GetTrustLevelResponse:
        trust = await self.flag_service.get_user_trust_level(request.user_id)
        return GetTrustLevelResponse(
            trust=trust,
            can_moderate=await self.flag_service.can_moderate(request.user_id),
        )
