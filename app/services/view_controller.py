"""
Машина состояний представлений: главная, детали блока, детали транзакции
"""

import logging
from enum import Enum
from typing import List, Optional, Union

from app.rendering import RenderingSink
from app.schemas.block import Block
from app.schemas.transaction import Transaction

logger = logging.getLogger(__name__)


class ViewState(str, Enum):
    """Представления страницы; значение совпадает с токеном для рендера"""

    MAIN = "mainView"
    BLOCK_DETAIL = "blockDetail"
    TRANSACTION_DETAIL = "txDetail"
    # Зарезервировано, переходов в него нет
    ADDRESS_DETAIL = "addressDetail"


Record = Union[Block, Transaction]


class ViewController:
    """
    Отслеживает единственное активное представление

    Состояние и запись меняются одним присваиванием, поэтому в любой момент
    активно ровно одно представление. Переходы не завершаются ошибкой:
    вызывающий код должен получить запись до перехода.
    """

    def __init__(self, sink: Optional[RenderingSink] = None):
        self._sink = sink
        self._state = ViewState.MAIN
        self._payload: Optional[Record] = None

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def payload(self) -> Optional[Record]:
        return self._payload

    def is_active(self, state: ViewState) -> bool:
        return self._state is state

    def active_states(self) -> List[ViewState]:
        return [state for state in ViewState if self.is_active(state)]

    def transition_to(self, state: ViewState, payload: Optional[Record] = None) -> None:
        """
        Переход в представление

        Args:
            state: Новое представление
            payload: Запись для детального представления (для MAIN игнорируется)
        """
        if state is ViewState.MAIN:
            payload = None

        previous = self._state
        self._state, self._payload = state, payload
        logger.debug(f"Переход представления: {previous.value} -> {state.value}")

        if self._sink is None:
            return

        if state is ViewState.BLOCK_DETAIL and payload is not None:
            self._sink.render_block_detail(payload)
        elif state is ViewState.TRANSACTION_DETAIL and payload is not None:
            self._sink.render_transaction_detail(payload)
        self._sink.show_view(state.value)

    def return_to_main(self) -> None:
        """Возврат на главную, загруженная запись сбрасывается"""
        self.transition_to(ViewState.MAIN)
