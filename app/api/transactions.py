"""
API endpoints для работы с транзакциями
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from app.config import settings
from app.dependencies import get_explorer_service
from app.schemas.transaction import Transaction, TransactionList
from app.services.chain_reader import NotFoundError, RetrievalError
from app.services.explorer_service import ExplorerService

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.get("/recent", response_model=TransactionList)
async def get_recent_transactions(
    count: int = Query(
        settings.RECENT_TRANSACTIONS_COUNT,
        ge=1,
        le=settings.MAX_TRANSACTIONS_PER_PAGE,
        description="Количество транзакций",
    ),
    explorer: ExplorerService = Depends(get_explorer_service),
):
    """
    Получить последние подтвержденные транзакции
    """
    try:
        transactions = await explorer.reader.recent_transactions(count)
    except RetrievalError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return TransactionList(transactions=transactions, count=len(transactions))


@router.get("/{tx_hash}", response_model=Transaction)
async def get_transaction(
    tx_hash: str,
    explorer: ExplorerService = Depends(get_explorer_service),
):
    """
    Получить информацию о транзакции по hash
    """
    try:
        return await explorer.reader.transaction_by_hash(tx_hash)
    except NotFoundError:
        raise HTTPException(status_code=404, detail=f"Транзакция {tx_hash} не найдена")
    except RetrievalError as e:
        raise HTTPException(status_code=502, detail=str(e))
