"""
Сервис чтения данных цепи: последние блоки, последние транзакции и поиск
"""

import logging
from typing import List, Optional, Protocol

from app.schemas.block import Block
from app.schemas.transaction import Transaction

logger = logging.getLogger(__name__)


class ChainReaderError(Exception):
    """Базовое исключение сервиса чтения цепи"""

    pass


class NotFoundError(ChainReaderError):
    """Узел сообщил, что блока или транзакции не существует"""

    pass


class RetrievalError(ChainReaderError):
    """Вызов узла завершился ошибкой, пакетная операция прервана"""

    pass


class ChainDataProvider(Protocol):
    """Источник данных цепи (узел Ethereum)"""

    async def get_tip_height(self) -> int: ...

    async def get_block(
        self, number: int, full_transactions: bool = False
    ) -> Optional[Block]: ...

    async def get_transaction(self, tx_hash: str) -> Optional[Transaction]: ...


class ChainReader:
    """
    Чтение последних блоков и транзакций от провайдера

    Кэша нет: каждая операция создает новые записи.
    Ошибка любого вызова провайдера прерывает всю операцию,
    частичные результаты не возвращаются.
    """

    def __init__(self, provider: ChainDataProvider):
        self.provider = provider

    async def _get_tip_height(self) -> int:
        try:
            return await self.provider.get_tip_height()
        except Exception as e:
            logger.error(f"Ошибка получения высоты цепи: {e}")
            raise RetrievalError(f"Не удалось получить высоту цепи: {e}") from e

    async def _get_block_in_batch(self, number: int, full_transactions: bool) -> Block:
        try:
            block = await self.provider.get_block(
                number, full_transactions=full_transactions
            )
        except Exception as e:
            logger.error(f"Ошибка получения блока {number}: {e}")
            raise RetrievalError(f"Не удалось получить блок {number}: {e}") from e

        if block is None:
            # Внутри пакета отсутствие блока означает исчерпание истории
            logger.error(f"Блок {number} отсутствует у провайдера")
            raise RetrievalError(f"Блок {number} отсутствует у провайдера")
        return block

    async def recent_blocks(self, count: int) -> List[Block]:
        """
        Получение count последних блоков, начиная с вершины цепи

        Args:
            count: Количество блоков

        Returns:
            Блоки с номерами tip, tip-1, ..., tip-count+1
        """
        if count < 0:
            raise ValueError(f"count не может быть отрицательным: {count}")
        if count == 0:
            return []

        tip = await self._get_tip_height()
        blocks = []
        for offset in range(count):
            block = await self._get_block_in_batch(tip - offset, False)
            blocks.append(block)
            logger.debug(f"Получен блок {block.number} ({offset + 1}/{count})")

        logger.info(f"Получено {len(blocks)} последних блоков от высоты {tip}")
        return blocks

    async def recent_transactions(self, count: int) -> List[Transaction]:
        """
        Получение count последних транзакций обходом блоков назад от вершины

        Сколько блоков понадобится, заранее неизвестно, поэтому блоки
        запрашиваются по одному. Обход останавливается, как только набрано
        count транзакций; оставшиеся транзакции последнего блока отбрасываются.

        Args:
            count: Количество транзакций
        """
        if count < 0:
            raise ValueError(f"count не может быть отрицательным: {count}")
        if count == 0:
            return []

        transactions: List[Transaction] = []
        cursor = await self._get_tip_height()

        while len(transactions) < count:
            if cursor < 0:
                logger.error(
                    f"История цепи исчерпана: набрано {len(transactions)} из {count}"
                )
                raise RetrievalError(
                    f"История цепи исчерпана: набрано {len(transactions)} "
                    f"транзакций из {count}"
                )

            block = await self._get_block_in_batch(cursor, True)
            for tx in block.full_transactions:
                transactions.append(tx)
                if len(transactions) >= count:
                    break

            logger.debug(f"Блок {cursor}: набрано {len(transactions)}/{count}")
            cursor -= 1

        logger.info(f"Получено {count} последних транзакций")
        return transactions[:count]

    async def block_by_number(self, number: int) -> Block:
        """
        Получение блока по номеру

        Args:
            number: Номер блока
        """
        try:
            block = await self.provider.get_block(number)
        except Exception as e:
            logger.error(f"Ошибка получения блока {number}: {e}")
            raise RetrievalError(f"Не удалось получить блок {number}: {e}") from e

        if block is None:
            raise NotFoundError(f"Блок {number} не найден")
        return block

    async def transaction_by_hash(self, tx_hash: str) -> Transaction:
        """
        Получение транзакции по hash

        Args:
            tx_hash: Hash транзакции
        """
        try:
            transaction = await self.provider.get_transaction(tx_hash)
        except Exception as e:
            logger.error(f"Ошибка получения транзакции {tx_hash}: {e}")
            raise RetrievalError(
                f"Не удалось получить транзакцию {tx_hash}: {e}"
            ) from e

        if transaction is None:
            raise NotFoundError(f"Транзакция {tx_hash} не найдена")
        return transaction
