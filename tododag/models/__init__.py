from .graph import (
    DependencyEdge,
    GraphReplaceResponse,
    GraphSnapshot,
    GraphValidationResponse,
    ItemId,
    ItemRelations,
    MoveCheckRequest,
    MoveCheckResponse,
    OrderResponse,
)
from .responses import OperationStatus

__all__ = [
    'DependencyEdge',
    'GraphReplaceResponse',
    'GraphSnapshot',
    'GraphValidationResponse',
    'ItemId',
    'ItemRelations',
    'MoveCheckRequest',
    'MoveCheckResponse',
    'OperationStatus',
    'OrderResponse',
]
