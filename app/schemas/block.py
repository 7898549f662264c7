"""
Pydantic схемы для блоков Ethereum
"""

from typing import List, Optional, Union

from pydantic import BaseModel, Field, model_validator

from app.schemas.transaction import Transaction

# Номер блока в Ethereum - uint64
MAX_BLOCK_NUMBER = 2**64 - 1


class Block(BaseModel):
    """
    Блок, полученный от узла

    transactions содержит либо hash транзакций, либо полные тела
    (если блок запрошен с full_transactions=True)
    """

    number: int = Field(..., ge=0, description="Номер блока")
    hash: str = Field(..., description="Hash блока")
    timestamp: int = Field(..., description="Время блока (Unix timestamp)")
    miner: str = Field(..., description="Адрес майнера / fee recipient")
    gas_used: int = Field(..., ge=0, description="Использованный газ")
    gas_limit: int = Field(..., ge=0, description="Лимит газа")
    base_fee_per_gas: Optional[int] = Field(
        None, ge=0, description="Base fee в wei (нет до London)"
    )
    transactions: List[Union[Transaction, str]] = Field(
        default_factory=list, description="Транзакции блока в исходном порядке"
    )

    class Config:
        frozen = True

    @model_validator(mode="after")
    def check_gas(self) -> "Block":
        if self.gas_used > self.gas_limit:
            raise ValueError(
                f"gas_used {self.gas_used} превышает gas_limit {self.gas_limit}"
            )
        return self

    @property
    def transaction_count(self) -> int:
        return len(self.transactions)

    @property
    def gas_used_percent(self) -> float:
        if not self.gas_limit:
            return 0.0
        return self.gas_used / self.gas_limit * 100

    @property
    def full_transactions(self) -> List[Transaction]:
        """Только полные тела транзакций, в порядке внутри блока"""
        return [tx for tx in self.transactions if isinstance(tx, Transaction)]


class BlockList(BaseModel):
    """Список последних блоков"""

    blocks: List[Block]
    count: int
