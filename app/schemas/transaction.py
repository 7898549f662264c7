"""
Pydantic схемы для транзакций Ethereum
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class Transaction(BaseModel):
    """Транзакция, полученная от узла"""

    hash: str = Field(..., description="Hash транзакции")
    block_number: Optional[int] = Field(
        None, ge=0, description="Номер блока, содержащего транзакцию"
    )
    from_address: str = Field(..., description="Адрес отправителя")
    to_address: Optional[str] = Field(
        None, description="Адрес получателя (None при создании контракта)"
    )
    value: int = Field(..., ge=0, description="Сумма в wei")

    class Config:
        frozen = True

    @property
    def is_contract_creation(self) -> bool:
        return self.to_address is None


class TransactionList(BaseModel):
    """Список последних транзакций"""

    transactions: List[Transaction]
    count: int
