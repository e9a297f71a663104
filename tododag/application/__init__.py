"""Use cases coordinating the constraint graph for the HTTP layer."""

from .graph import (
    AddDependencyUseCase,
    AddItemUseCase,
    CheckMoveUseCase,
    ExportGraphUseCase,
    GetItemRelationsUseCase,
    GetOrderUseCase,
    ListDependenciesUseCase,
    RemoveDependencyUseCase,
    RemoveItemUseCase,
    ReplaceGraphUseCase,
    ValidateGraphUseCase,
)

__all__ = [
    "AddDependencyUseCase",
    "AddItemUseCase",
    "CheckMoveUseCase",
    "ExportGraphUseCase",
    "GetItemRelationsUseCase",
    "GetOrderUseCase",
    "ListDependenciesUseCase",
    "RemoveDependencyUseCase",
    "RemoveItemUseCase",
    "ReplaceGraphUseCase",
    "ValidateGraphUseCase",
]
