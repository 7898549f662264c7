"""
Рендеринг страницы обозревателя: состояние страницы и фильтры Jinja2
"""

import logging
import time
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path
from typing import List, Optional, Protocol, Sequence

from fastapi.templating import Jinja2Templates
from pydantic import BaseModel
from web3 import Web3

from app.schemas.block import Block
from app.schemas.transaction import Transaction

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"

MAIN_VIEW = "mainView"


class RenderingSink(Protocol):
    """Приемник данных для отображения; ядро только пишет в него"""

    def render_blocks(self, blocks: Sequence[Block]) -> None: ...

    def render_transactions(self, transactions: Sequence[Transaction]) -> None: ...

    def render_block_detail(self, block: Block) -> None: ...

    def render_transaction_detail(self, transaction: Transaction) -> None: ...

    def show_view(self, view_name: str) -> None: ...

    def show_error(self, message: str) -> None: ...

    def clear_error(self) -> None: ...


class PageState(BaseModel):
    """Снимок того, что сейчас отображается на странице"""

    active_view: str = MAIN_VIEW
    blocks: List[Block] = []
    transactions: List[Transaction] = []
    block_detail: Optional[Block] = None
    transaction_detail: Optional[Transaction] = None
    error: Optional[str] = None


class PageRenderer:
    """Реализация RenderingSink для HTML страницы"""

    def __init__(self):
        self.state = PageState()

    def render_blocks(self, blocks: Sequence[Block]) -> None:
        self.state.blocks = list(blocks)

    def render_transactions(self, transactions: Sequence[Transaction]) -> None:
        self.state.transactions = list(transactions)

    def render_block_detail(self, block: Block) -> None:
        self.state.block_detail = block

    def render_transaction_detail(self, transaction: Transaction) -> None:
        self.state.transaction_detail = transaction

    def show_view(self, view_name: str) -> None:
        # Одно поле: предыдущее представление скрывается в момент показа нового
        self.state.active_view = view_name

    def show_error(self, message: str) -> None:
        logger.warning(f"Ошибка для пользователя: {message}")
        self.state.error = message

    def clear_error(self) -> None:
        self.state.error = None


# Фильтры для шаблонов


def shorten_hash(value: Optional[str]) -> str:
    """0x1234567890...abcdef"""
    if not value:
        return ""
    return value[:10] + "..." + value[-6:]


def time_ago(timestamp: int, now: Optional[float] = None) -> str:
    if now is None:
        now = time.time()
    diff = int(now) - timestamp
    if diff < 60:
        return f"{diff} secs ago"
    if diff < 3600:
        return f"{diff // 60} mins ago"
    return f"{diff // 3600} hours ago"


def format_ether(wei: int, places: int = 4) -> str:
    """Сумма в wei -> ETH без потери точности (Decimal)"""
    return f"{Decimal(Web3.from_wei(wei, 'ether')):.{places}f}"


def format_gwei(wei: Optional[int], places: int = 4) -> str:
    if wei is None:
        return "N/A"
    return f"{Decimal(Web3.from_wei(wei, 'gwei')):.{places}f}"


def gas_percent(block: Block) -> str:
    return f"{block.gas_used_percent:.1f}"


def format_timestamp(timestamp: int) -> str:
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime(
        "%Y-%m-%d %H:%M:%S UTC"
    )


templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters.update(
    shorten_hash=shorten_hash,
    time_ago=time_ago,
    format_ether=format_ether,
    format_gwei=format_gwei,
    gas_percent=gas_percent,
    format_timestamp=format_timestamp,
)
