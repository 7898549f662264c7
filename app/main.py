"""
Главное FastAPI приложение Ethereum Block Explorer
"""

import logging

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles

from app.api import blocks, search, transactions, view
from app.config import settings
from app.dependencies import (
    get_chain_provider,
    get_explorer_service,
    get_page_renderer,
)
from app.lifespan import lifespan
from app.rendering import TEMPLATES_DIR, PageRenderer, templates
from app.services.chain_reader import NotFoundError, RetrievalError
from app.services.eth_rpc import EthereumRPCClient
from app.services.explorer_service import ExplorerService
from app.services.query_classifier import InvalidQueryError

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Создаем FastAPI приложение
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Минималистичный block explorer для Ethereum",
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.DEBUG,
    lifespan=lifespan,
)

# Настройка CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Подключение статических файлов
app.mount(
    "/static", StaticFiles(directory=TEMPLATES_DIR.parent / "static"), name="static"
)

# Подключение API роутеров
app.include_router(blocks.router, prefix=settings.API_V1_STR)
app.include_router(transactions.router, prefix=settings.API_V1_STR)
app.include_router(search.router, prefix=settings.API_V1_STR)
app.include_router(view.router, prefix=settings.API_V1_STR)


def _back_to_page() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=303)


@app.get("/", response_class=HTMLResponse)
async def root(
    request: Request, renderer: PageRenderer = Depends(get_page_renderer)
):
    """Страница обозревателя в текущем представлении"""
    return templates.TemplateResponse(
        request, "index.html", {"page": renderer.state}
    )


@app.get("/block/{number}")
async def block_page(
    number: int, explorer: ExplorerService = Depends(get_explorer_service)
):
    """Открыть детали блока; при ошибке представление не меняется"""
    try:
        await explorer.open_block(number)
    except NotFoundError:
        explorer.report_error(f"Block {number} not found.")
    except RetrievalError as e:
        logger.error(f"Ошибка загрузки блока {number}: {e}")
        explorer.report_error("Failed to load block.")
    return _back_to_page()


@app.get("/tx/{tx_hash}")
async def transaction_page(
    tx_hash: str, explorer: ExplorerService = Depends(get_explorer_service)
):
    """Открыть детали транзакции; при ошибке представление не меняется"""
    try:
        await explorer.open_transaction(tx_hash)
    except NotFoundError:
        explorer.report_error("Transaction not found.")
    except RetrievalError as e:
        logger.error(f"Ошибка загрузки транзакции {tx_hash}: {e}")
        explorer.report_error("Failed to load transaction.")
    return _back_to_page()


@app.get("/search")
async def search_page(
    q: str = "", explorer: ExplorerService = Depends(get_explorer_service)
):
    """Поиск по номеру блока или hash транзакции"""
    try:
        await explorer.search(q)
    except InvalidQueryError as e:
        explorer.report_error(str(e))
    except NotFoundError:
        explorer.report_error(f"Nothing found for '{q.strip()}'.")
    except RetrievalError as e:
        logger.error(f"Ошибка поиска по запросу '{q}': {e}")
        explorer.report_error("Search failed. Try again later.")
    return _back_to_page()


@app.get("/main")
async def main_page(explorer: ExplorerService = Depends(get_explorer_service)):
    """Вернуться на главную"""
    explorer.show_main()
    return _back_to_page()


@app.post("/error/dismiss")
async def dismiss_error(explorer: ExplorerService = Depends(get_explorer_service)):
    """Закрыть сообщение об ошибке"""
    explorer.dismiss_error()
    return _back_to_page()


@app.get("/health")
async def health_check(provider: EthereumRPCClient = Depends(get_chain_provider)):
    """Health check endpoint: доступность Ethereum узла"""
    node_connected = await provider.test_connection()
    return {
        "status": "healthy" if node_connected else "degraded",
        "service": settings.PROJECT_NAME,
        "node_connected": node_connected,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=settings.DEBUG)
