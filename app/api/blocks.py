"""
API endpoints для работы с блоками
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from app.config import settings
from app.dependencies import get_explorer_service
from app.schemas.block import Block, BlockList
from app.services.chain_reader import NotFoundError, RetrievalError
from app.services.explorer_service import ExplorerService

router = APIRouter(prefix="/blocks", tags=["blocks"])


@router.get("/recent", response_model=BlockList)
async def get_recent_blocks(
    count: int = Query(
        settings.RECENT_BLOCKS_COUNT,
        ge=1,
        le=settings.MAX_BLOCKS_PER_PAGE,
        description="Количество блоков",
    ),
    explorer: ExplorerService = Depends(get_explorer_service),
):
    """
    Получить последние блоки, начиная с вершины цепи
    """
    try:
        blocks = await explorer.reader.recent_blocks(count)
    except RetrievalError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return BlockList(blocks=blocks, count=len(blocks))


@router.get("/{number}", response_model=Block)
async def get_block(
    number: int,
    explorer: ExplorerService = Depends(get_explorer_service),
):
    """
    Получить блок по номеру
    """
    try:
        return await explorer.reader.block_by_number(number)
    except NotFoundError:
        raise HTTPException(status_code=404, detail=f"Блок {number} не найден")
    except RetrievalError as e:
        raise HTTPException(status_code=502, detail=str(e))
