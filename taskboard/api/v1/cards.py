"""Card endpoints"""
from fastapi import APIRouter, Depends, status

from taskboard.dependencies import get_board_service, get_current_board_id
from taskboard.schemas import CardCreate, CardMove, CardResponse, CardUpdate, MessageResponse
from taskboard.services import BoardService

router = APIRouter()


@router.post("", response_model=CardResponse, status_code=status.HTTP_201_CREATED)
def create_card(
    card_in: CardCreate,
    board_id: str = Depends(get_current_board_id),
    service: BoardService = Depends(get_board_service),
):
    """Create a card at the end of the given column."""
    return service.create_card(board_id, card_in)


@router.put("/{card_id}", response_model=CardResponse)
def update_card(
    card_id: str,
    card_update: CardUpdate,
    board_id: str = Depends(get_current_board_id),
    service: BoardService = Depends(get_board_service),
):
    """Change the non-empty fields of a card and return the whole card."""
    return service.update_card(board_id, card_id, card_update)


@router.put("/{card_id}/move", response_model=CardResponse)
def move_card(
    card_id: str,
    move: CardMove,
    board_id: str = Depends(get_current_board_id),
    service: BoardService = Depends(get_board_service),
):
    return service.move_card(board_id, card_id, move)


@router.delete("/{card_id}", response_model=MessageResponse)
def delete_card(
    card_id: str,
    board_id: str = Depends(get_current_board_id),
    service: BoardService = Depends(get_board_service),
):
    service.delete_card(board_id, card_id)
    return MessageResponse(message="Card deleted")
