"""Resolve flag use case."""

from typing import Literal

import logfire
from pydantic import BaseModel

from forum.domain.error import NotAuthorizedError, NotFoundError
from forum.domain.model.flag import ModerationFlag
from forum.domain.service import FlagService
from forum.domain.value import FlagId, FlagStatus


class ResolveFlagRequest(BaseModel):
    """Resolve flag request."""

    flag_id: str
    action: Literal["resolved", "dismissed"]
    resolver_id: str


class ResolveFlagResponse(BaseModel):
    """Resolve flag response."""

    flag: ModerationFlag


class ResolveFlagUseCase:
    """Use case for closing a flag. Only users who can moderate may do so."""

    def __init__(self, flag_service: FlagService) -> None:
        """Initialize resolve flag use case.

        Args:
            flag_service: Flag domain service
        """
        self.flag_service = flag_service

    async def execute(self, request: ResolveFlagRequest) -> ResolveFlagResponse:
        """Execute resolve flag flow.

        Raises:
            NotAuthorizedError: If the resolver cannot moderate
            NotFoundError: If the flag does not exist
        """
        if not await self.flag_service.can_moderate(request.resolver_id):
            logfire.warn(
                "Unauthorized flag resolution attempt",
                flag_id=request.flag_id,
                resolver_id=request.resolver_id,
            )
            raise NotAuthorizedError("resolve flags", request.resolver_id)

        flag = await self.flag_service.resolve_flag(
            FlagId(request.flag_id), FlagStatus(request.action), request.resolver_id
        )
        if flag is None:
            raise NotFoundError("Flag", request.flag_id)

        return ResolveFlagResponse(flag=flag)
