"""
Pydantic схемы поискового запроса
"""

from typing import Literal, Union

from pydantic import BaseModel


class BlockNumberQuery(BaseModel):
    """Запрос блока по номеру"""

    number: int

    class Config:
        frozen = True


class TransactionHashQuery(BaseModel):
    """Запрос транзакции по hash"""

    tx_hash: str

    class Config:
        frozen = True


class InvalidQuery(BaseModel):
    """Запрос, не подходящий ни под один формат"""

    raw: str
    reason: Literal["empty", "unrecognized"]

    class Config:
        frozen = True


SearchQuery = Union[BlockNumberQuery, TransactionHashQuery, InvalidQuery]
