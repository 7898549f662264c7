"""
API endpoints для состояния представления
"""

from fastapi import APIRouter, Depends

from app.dependencies import get_explorer_service
from app.schemas.view import ViewStatus
from app.services.explorer_service import ExplorerService

router = APIRouter(prefix="/view", tags=["view"])


@router.get("", response_model=ViewStatus)
async def get_view(explorer: ExplorerService = Depends(get_explorer_service)):
    """
    Текущее активное представление
    """
    views = explorer.views
    return ViewStatus(view=views.state.value, record=views.payload)


@router.post("/main", response_model=ViewStatus)
async def return_to_main(explorer: ExplorerService = Depends(get_explorer_service)):
    """
    Вернуться на главную
    """
    explorer.show_main()
    return ViewStatus(view=explorer.views.state.value)
