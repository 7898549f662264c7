"""
Обработка действий пользователя: загрузка главной, открытие деталей, поиск
"""

import logging
from typing import Union

from app.config import settings
from app.rendering import RenderingSink
from app.schemas.block import Block
from app.schemas.transaction import Transaction
from app.services.chain_reader import ChainReader
from app.services.query_classifier import classify, resolve
from app.services.view_controller import ViewController, ViewState

logger = logging.getLogger(__name__)


class ExplorerService:
    """
    Связывает действия пользователя с ChainReader и ViewController

    Переход в детальное представление выполняется только после успешного
    получения записи; при ошибке представление не меняется, а ошибка
    передается вызывающему коду.
    """

    def __init__(
        self, reader: ChainReader, views: ViewController, sink: RenderingSink
    ):
        self.reader = reader
        self.views = views
        self.sink = sink

    async def start(
        self,
        blocks_count: int = settings.RECENT_BLOCKS_COUNT,
        transactions_count: int = settings.RECENT_TRANSACTIONS_COUNT,
    ) -> None:
        """
        Начальная загрузка: главная страница с последними блоками и транзакциями

        Args:
            blocks_count: Количество последних блоков
            transactions_count: Количество последних транзакций
        """
        logger.info("Загрузка блоков и транзакций...")
        self.views.return_to_main()

        blocks = await self.reader.recent_blocks(blocks_count)
        transactions = await self.reader.recent_transactions(transactions_count)

        self.sink.render_blocks(blocks)
        self.sink.render_transactions(transactions)
        logger.info(
            f"Главная загружена: блоков={len(blocks)}, транзакций={len(transactions)}"
        )

    async def open_block(self, number: int) -> Block:
        block = await self.reader.block_by_number(number)
        self.views.transition_to(ViewState.BLOCK_DETAIL, block)
        self.sink.clear_error()
        return block

    async def open_transaction(self, tx_hash: str) -> Transaction:
        transaction = await self.reader.transaction_by_hash(tx_hash)
        self.views.transition_to(ViewState.TRANSACTION_DETAIL, transaction)
        self.sink.clear_error()
        return transaction

    async def search(self, raw_query: str) -> Union[Block, Transaction]:
        """
        Поиск по номеру блока или hash транзакции

        Args:
            raw_query: Строка поиска как ее ввел пользователь
        """
        record = await resolve(classify(raw_query), self.reader)

        if isinstance(record, Block):
            self.views.transition_to(ViewState.BLOCK_DETAIL, record)
        else:
            self.views.transition_to(ViewState.TRANSACTION_DETAIL, record)
        self.sink.clear_error()
        return record

    def show_main(self) -> None:
        self.views.return_to_main()
        self.sink.clear_error()

    def report_error(self, message: str) -> None:
        self.sink.show_error(message)

    def dismiss_error(self) -> None:
        self.sink.clear_error()
