# Pydantic schemas package

from .block import Block, BlockList
from .search import BlockNumberQuery, InvalidQuery, SearchQuery, TransactionHashQuery
from .transaction import Transaction, TransactionList
from .view import ViewStatus

__all__ = [
    # Block schemas
    "Block",
    "BlockList",
    # Transaction schemas
    "Transaction",
    "TransactionList",
    # Search schemas
    "BlockNumberQuery",
    "TransactionHashQuery",
    "InvalidQuery",
    "SearchQuery",
    # View schemas
    "ViewStatus",
]
