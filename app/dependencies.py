"""
Зависимости FastAPI: сервисы, созданные при запуске приложения
"""

from fastapi import Request

from app.rendering import PageRenderer
from app.services.eth_rpc import EthereumRPCClient
from app.services.explorer_service import ExplorerService


def get_explorer_service(request: Request) -> ExplorerService:
    """
    Экземпляр ExplorerService из app.state
    Переопределяется в тестах через app.dependency_overrides
    """
    return request.app.state.explorer


def get_page_renderer(request: Request) -> PageRenderer:
    return request.app.state.renderer


def get_chain_provider(request: Request) -> EthereumRPCClient:
    return request.app.state.provider
