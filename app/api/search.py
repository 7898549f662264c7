"""
API endpoint для поиска по номеру блока или hash транзакции
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from app.dependencies import get_explorer_service
from app.schemas.block import Block
from app.services.chain_reader import NotFoundError, RetrievalError
from app.services.explorer_service import ExplorerService
from app.services.query_classifier import InvalidQueryError, classify, resolve

logger = logging.getLogger(__name__)

router = APIRouter(tags=["search"])


@router.get("/search")
async def search(
    q: str = Query("", description="Поисковый запрос"),
    explorer: ExplorerService = Depends(get_explorer_service),
):
    """
    Поиск блока или транзакции

    Поддерживаемые форматы:
    - Номер блока (только десятичные цифры)
    - Hash транзакции (0x + 64 символа)
    """
    try:
        record = await resolve(classify(q), explorer.reader)
    except InvalidQueryError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError:
        raise HTTPException(
            status_code=404, detail=f"По запросу '{q.strip()}' ничего не найдено"
        )
    except RetrievalError as e:
        logger.error(f"Ошибка поиска по запросу '{q}': {e}")
        raise HTTPException(status_code=502, detail=str(e))

    return {
        "query": q,
        "type": "block" if isinstance(record, Block) else "transaction",
        "data": record,
    }
