"""Moderation flag use cases."""

from .get_trust_level import (
    GetTrustLevelRequest,
    GetTrustLevelResponse,
    GetTrustLevelUseCase,
)
from .resolve_flag import ResolveFlagRequest, ResolveFlagResponse, ResolveFlagUseCase
from .submit_flag import SubmitFlagRequest, SubmitFlagResponse, SubmitFlagUseCase

__all__ = [
    "GetTrustLevelRequest",
    "GetTrustLevelResponse",
    "GetTrustLevelUseCase",
    "ResolveFlagRequest",
    "ResolveFlagResponse",
    "ResolveFlagUseCase",
    "SubmitFlagRequest",
    "SubmitFlagResponse",
    "SubmitFlagUseCase",
]
