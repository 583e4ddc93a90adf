"""FastAPI dependencies shared by the API routers."""
from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from taskboard.config import settings
from taskboard.database import get_db
from taskboard.services import BoardService, IdentityBroker, get_identity_broker


def get_board_service(
    db: Session = Depends(get_db),
    identity: IdentityBroker = Depends(get_identity_broker),
) -> BoardService:
    return BoardService(db, identity, password_min_length=settings.PASSWORD_MIN_LENGTH)


def get_auth_token(request: Request) -> Optional[str]:
    return request.cookies.get(settings.AUTH_COOKIE_NAME)


def get_current_board_id(
    token: Optional[str] = Depends(get_auth_token),
    identity: IdentityBroker = Depends(get_identity_broker),
) -> str:
    """Return the board bound to the session cookie, or raise ``AuthError``."""
    return identity.verify_credential(token)
