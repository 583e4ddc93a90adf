"""Board endpoints: creation, login, logout and the full board view"""
from fastapi import APIRouter, Depends, Response, status

from taskboard.config import settings
from taskboard.dependencies import get_board_service, get_current_board_id
from taskboard.schemas import BoardCreate, BoardLogin, BoardResponse, LoginResponse, MessageResponse
from taskboard.services import BoardService, Credential

router = APIRouter()


def _set_auth_cookie(response: Response, credential: Credential) -> None:
    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=credential.token,
        expires=credential.expires_at,
        max_age=int((credential.expires_at - credential.issued_at).total_seconds()),
        httponly=True,
        secure=settings.AUTH_COOKIE_SECURE,
        samesite="lax",
    )


@router.post("/boards", response_model=BoardResponse, status_code=status.HTTP_201_CREATED)
def create_board(
    board_in: BoardCreate,
    response: Response,
    service: BoardService = Depends(get_board_service),
):
    """Create a board and log the caller into it."""
    board, credential = service.create_board(board_in.name, board_in.password)
    _set_auth_cookie(response, credential)
    return board


@router.post("/boards/{board_id}/login", response_model=LoginResponse)
def login(
    board_id: str,
    credentials: BoardLogin,
    response: Response,
    service: BoardService = Depends(get_board_service),
):
    credential = service.login(board_id, credentials.password)
    _set_auth_cookie(response, credential)
    return LoginResponse(message="Logged in", board_id=board_id)


@router.get("/board", response_model=BoardResponse)
def get_board(
    board_id: str = Depends(get_current_board_id),
    service: BoardService = Depends(get_board_service),
):
    return service.get_board(board_id)


@router.post("/logout", response_model=MessageResponse)
def logout(response: Response, board_id: str = Depends(get_current_board_id)):
    """Drop the session cookie by replacing it with an already-expired one."""
    response.delete_cookie(
        key=settings.AUTH_COOKIE_NAME,
        httponly=True,
        secure=settings.AUTH_COOKIE_SECURE,
        samesite="lax",
    )
    return MessageResponse(message="Logged out")
