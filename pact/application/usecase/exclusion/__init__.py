"""Exclusion use cases."""

from pact.application.usecase.exclusion.add_exclusion import (
    AddExclusionRequest,
    AddExclusionResponse,
    AddExclusionUseCase,
)
from pact.application.usecase.exclusion.items import ExclusionItem
from pact.application.usecase.exclusion.list_exclusions import (
    ListExclusionsRequest,
    ListExclusionsResponse,
    ListExclusionsUseCase,
)
from pact.application.usecase.exclusion.remove_exclusion import (
    RemoveExclusionRequest,
    RemoveExclusionUseCase,
)

__all__ = [
    "AddExclusionRequest",
    "AddExclusionResponse",
    "AddExclusionUseCase",
    "ExclusionItem",
    "ListExclusionsRequest",
    "ListExclusionsResponse",
    "ListExclusionsUseCase",
    "RemoveExclusionRequest",
    "RemoveExclusionUseCase",
]
