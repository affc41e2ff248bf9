"""Matching use cases."""

from pact.application.usecase.matching.run_matching_cycle import (
    RunMatchingCycleRequest,
    RunMatchingCycleResponse,
    RunMatchingCycleUseCase,
)

__all__ = [
    "RunMatchingCycleRequest",
    "RunMatchingCycleResponse",
    "RunMatchingCycleUseCase",
]
