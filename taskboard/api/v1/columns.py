"""Column endpoints"""
from fastapi import APIRouter, Depends, status

from taskboard.dependencies import get_board_service, get_current_board_id
from taskboard.schemas import ColumnCreate, ColumnResponse, ColumnUpdate, MessageResponse
from taskboard.services import BoardService

router = APIRouter()


@router.post("", response_model=ColumnResponse, status_code=status.HTTP_201_CREATED)
def create_column(
    column_in: ColumnCreate,
    board_id: str = Depends(get_current_board_id),
    service: BoardService = Depends(get_board_service),
):
    """Append a column after the board's existing columns."""
    return service.create_column(board_id, column_in.name)


@router.put("/{column_id}", response_model=ColumnResponse)
def update_column(
    column_id: str,
    column_in: ColumnUpdate,
    board_id: str = Depends(get_current_board_id),
    service: BoardService = Depends(get_board_service),
):
    return service.update_column(board_id, column_id, column_in.name)


@router.delete("/{column_id}", response_model=MessageResponse)
def delete_column(
    column_id: str,
    board_id: str = Depends(get_current_board_id),
    service: BoardService = Depends(get_board_service),
):
    """Delete a column together with every card in it."""
    service.delete_column(board_id, column_id)
    return MessageResponse(message="Column deleted")
