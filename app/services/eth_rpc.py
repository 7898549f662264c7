"""
Ethereum JSON-RPC клиент для получения данных цепи
"""

import logging
from typing import Any, Mapping, Optional

from aiohttp import ClientTimeout
from eth_utils import is_hex
from web3 import AsyncHTTPProvider, AsyncWeb3
from web3.exceptions import BlockNotFound, TransactionNotFound

from app.config import settings
from app.schemas.block import MAX_BLOCK_NUMBER, Block
from app.schemas.transaction import Transaction

logger = logging.getLogger(__name__)


class EthereumRPCError(Exception):
    """Исключение для ошибок Ethereum RPC"""

    pass


def _to_hex(value: Any) -> str:
    if isinstance(value, (bytes, bytearray)):
        return AsyncWeb3.to_hex(value)
    return str(value)


def parse_transaction(tx_data: Mapping[str, Any]) -> Transaction:
    """Преобразование ответа узла в Transaction"""
    to_address = tx_data.get("to")
    return Transaction(
        hash=_to_hex(tx_data["hash"]),
        block_number=tx_data.get("blockNumber"),
        from_address=tx_data["from"],
        to_address=to_address if to_address else None,
        value=int(tx_data["value"]),
    )


def parse_block(block_data: Mapping[str, Any]) -> Block:
    """Преобразование ответа узла в Block"""
    transactions = [
        parse_transaction(tx) if isinstance(tx, Mapping) else _to_hex(tx)
        for tx in block_data.get("transactions", [])
    ]
    return Block(
        number=block_data["number"],
        hash=_to_hex(block_data["hash"]),
        timestamp=block_data["timestamp"],
        miner=block_data["miner"],
        gas_used=block_data["gasUsed"],
        gas_limit=block_data["gasLimit"],
        base_fee_per_gas=block_data.get("baseFeePerGas"),
        transactions=transactions,
    )


class EthereumRPCClient:
    """
    Клиент для Ethereum узла через JSON-RPC

    Отсутствующие блоки и транзакции возвращаются как None,
    любая другая ошибка поднимается как EthereumRPCError.
    Повторных попыток нет: решение о retry принимает вызывающий код.
    """

    def __init__(self, rpc_url: Optional[str] = None, timeout: Optional[int] = None):
        self._rpc_url = rpc_url or settings.rpc_url
        self._timeout = timeout or settings.ETH_RPC_TIMEOUT
        self._w3 = AsyncWeb3(
            AsyncHTTPProvider(
                self._rpc_url,
                request_kwargs={"timeout": ClientTimeout(total=self._timeout)},
            )
        )

    async def get_tip_height(self) -> int:
        """Получение номера последнего блока"""
        try:
            return int(await self._w3.eth.block_number)
        except Exception as e:
            logger.error(f"Ошибка получения номера последнего блока: {e}")
            raise EthereumRPCError(f"Не удалось получить номер блока: {e}") from e

    async def get_block(
        self, number: int, full_transactions: bool = False
    ) -> Optional[Block]:
        """
        Получение блока по номеру

        Args:
            number: Номер блока
            full_transactions: Возвращать полные тела транзакций вместо hash
        """
        if number < 0 or number > MAX_BLOCK_NUMBER:
            return None

        try:
            block_data = await self._w3.eth.get_block(
                number, full_transactions=full_transactions
            )
        except BlockNotFound:
            return None
        except Exception as e:
            logger.error(f"RPC ошибка при получении блока {number}: {e}")
            raise EthereumRPCError(f"Не удалось получить блок {number}: {e}") from e

        if block_data is None:
            return None

        try:
            return parse_block(block_data)
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Некорректный ответ узла для блока {number}: {e}")
            raise EthereumRPCError(f"Некорректные данные блока {number}: {e}") from e

    async def get_transaction(self, tx_hash: str) -> Optional[Transaction]:
        """
        Получение транзакции по hash

        Args:
            tx_hash: Hash транзакции (0x + 64 hex символа)
        """
        if not is_hex(tx_hash):
            return None

        try:
            tx_data = await self._w3.eth.get_transaction(tx_hash)
        except TransactionNotFound:
            return None
        except Exception as e:
            logger.error(f"RPC ошибка при получении транзакции {tx_hash}: {e}")
            raise EthereumRPCError(
                f"Не удалось получить транзакцию {tx_hash}: {e}"
            ) from e

        if tx_data is None:
            return None

        try:
            return parse_transaction(tx_data)
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Некорректный ответ узла для транзакции {tx_hash}: {e}")
            raise EthereumRPCError(
                f"Некорректные данные транзакции {tx_hash}: {e}"
            ) from e

    async def test_connection(self) -> bool:
        """Тестирование подключения к узлу"""
        try:
            return await self._w3.is_connected()
        except Exception as e:
            logger.error(f"Тест подключения неудачен: {e}")
            return False

    async def close(self) -> None:
        """Закрытие HTTP сессии"""
        await self._w3.provider.disconnect()
        logger.info("Соединение с Ethereum узлом закрыто")
