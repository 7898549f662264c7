"""
Pydantic схемы состояния представления
"""

from typing import Optional, Union

from pydantic import BaseModel

from app.schemas.block import Block
from app.schemas.transaction import Transaction


class ViewStatus(BaseModel):
    """Текущее активное представление и загруженная запись"""

    view: str
    record: Optional[Union[Block, Transaction]] = None
