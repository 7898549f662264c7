"""
Классификация поискового запроса: номер блока или hash транзакции
"""

import logging
import re
from typing import Union

from app.schemas.block import MAX_BLOCK_NUMBER, Block
from app.schemas.search import (
    BlockNumberQuery,
    InvalidQuery,
    SearchQuery,
    TransactionHashQuery,
)
from app.schemas.transaction import Transaction
from app.services.chain_reader import ChainReader

logger = logging.getLogger(__name__)

TX_HASH_PREFIX = "0x"
TX_HASH_LENGTH = 66

_BLOCK_NUMBER_RE = re.compile(r"[0-9]+")

# Больше любого возможного номера блока; такого блока нет ни на одном узле
BLOCK_NUMBER_OUT_OF_RANGE = MAX_BLOCK_NUMBER + 1

EMPTY_QUERY_MESSAGE = "Please enter something to search"
INVALID_QUERY_MESSAGE = (
    "Invalid search query. Enter a block number or transaction hash."
)


class InvalidQueryError(Exception):
    """Запрос не соответствует ни одному формату"""

    def __init__(self, query: InvalidQuery):
        self.query = query
        if query.reason == "empty":
            message = EMPTY_QUERY_MESSAGE
        else:
            message = INVALID_QUERY_MESSAGE
        super().__init__(message)


def _parse_block_number(digits: str) -> int:
    # int() не принимает строки длиннее sys.get_int_max_str_digits()
    significant = digits.lstrip("0") or "0"
    if len(significant) > len(str(MAX_BLOCK_NUMBER)):
        return BLOCK_NUMBER_OUT_OF_RANGE
    return min(int(significant), BLOCK_NUMBER_OUT_OF_RANGE)


def classify(raw_input: str) -> SearchQuery:
    """
    Определение типа запроса по форме строки

    Проверяется только форма: hash нужной длины с некорректными символами
    передается дальше и завершится NotFoundError при поиске.

    Args:
        raw_input: Строка, введенная пользователем
    """
    query = raw_input.strip()

    if not query:
        return InvalidQuery(raw=raw_input, reason="empty")

    if _BLOCK_NUMBER_RE.fullmatch(query):
        return BlockNumberQuery(number=_parse_block_number(query))

    if query.startswith(TX_HASH_PREFIX) and len(query) == TX_HASH_LENGTH:
        return TransactionHashQuery(tx_hash=query)

    return InvalidQuery(raw=raw_input, reason="unrecognized")


async def resolve(
    query: SearchQuery, reader: ChainReader
) -> Union[Block, Transaction]:
    """
    Выполнение классифицированного запроса через ChainReader

    Raises:
        InvalidQueryError: до любого обращения к провайдеру
        NotFoundError, RetrievalError: от ChainReader
    """
    if isinstance(query, BlockNumberQuery):
        return await reader.block_by_number(query.number)
    if isinstance(query, TransactionHashQuery):
        return await reader.transaction_by_hash(query.tx_hash)

    logger.warning(f"Некорректный поисковый запрос: '{query.raw}'")
    raise InvalidQueryError(query)
