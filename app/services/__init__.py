# Business logic services package

from app.services.chain_reader import (
    ChainReader,
    ChainReaderError,
    NotFoundError,
    RetrievalError,
)
from app.services.eth_rpc import EthereumRPCClient, EthereumRPCError
from app.services.explorer_service import ExplorerService
from app.services.query_classifier import InvalidQueryError, classify, resolve
from app.services.view_controller import ViewController, ViewState

__all__ = [
    "ChainReader",
    "ChainReaderError",
    "NotFoundError",
    "RetrievalError",
    "EthereumRPCClient",
    "EthereumRPCError",
    "ExplorerService",
    "InvalidQueryError",
    "classify",
    "resolve",
    "ViewController",
    "ViewState",
]
