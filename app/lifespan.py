"""
Жизненный цикл приложения: сборка сервисов и начальная загрузка
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI

from app.config import settings
from app.rendering import PageRenderer
from app.services.chain_reader import ChainDataProvider, ChainReader, RetrievalError
from app.services.eth_rpc import EthereumRPCClient
from app.services.explorer_service import ExplorerService
from app.services.view_controller import ViewController

logger = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = "Failed to load blockchain data. Check the node connection."


def build_explorer(
    provider: ChainDataProvider, renderer: Optional[PageRenderer] = None
) -> ExplorerService:
    """
    Сборка ExplorerService: один ChainReader и один ViewController на приложение

    ViewController и PageRenderer общие для всех HTTP клиентов: обозреватель
    работает как один пользовательский интерфейс, и переход в одном браузере
    виден во всех остальных.
    """
    renderer = renderer or PageRenderer()
    return ExplorerService(
        reader=ChainReader(provider),
        views=ViewController(renderer),
        sink=renderer,
    )


async def load_main_page(explorer: ExplorerService) -> bool:
    """
    Начальная загрузка главной страницы

    Ошибка узла не останавливает приложение: она показывается пользователю.
    """
    try:
        await explorer.start()
        logger.info("Block Explorer готов")
        return True
    except RetrievalError as e:
        logger.error(f"Ошибка начальной загрузки: {e}")
        explorer.report_error(LOAD_FAILED_MESSAGE)
        return False


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Контекстный менеджер жизненного цикла приложения

    Создает клиент узла и сервисы при старте, закрывает клиент при завершении
    """
    # Startup
    logger.info("Запуск приложения...")

    provider = EthereumRPCClient()
    renderer = PageRenderer()
    app.state.provider = provider
    app.state.renderer = renderer
    app.state.explorer = build_explorer(provider, renderer)

    try:
        if settings.LOAD_ON_STARTUP:
            await load_main_page(app.state.explorer)
        logger.info("Приложение запущено успешно")

        yield

    finally:
        # Shutdown
        logger.info("Остановка приложения...")
        await provider.close()
        logger.info("Приложение остановлено")
