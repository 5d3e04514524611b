from typing import Optional

from fastapi import HTTPException, Cookie, Response, status, Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from malasngoding.config import get_db, settings
from malasngoding.models.models import User
from malasngoding.schemas.auth_schemas import RegisterRequest
from malasngoding.utils.common import avatar_url_for, display_name
from malasngoding.utils.jwt import verify_token, get_password_hash, create_access_token, verify_password
from malasngoding.utils.logger import get_logger, set_user_id

logger = get_logger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    access_token: Optional[str] = Cookie(None),
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Resolve the request to exactly one user from a bearer token or the access_token cookie."""
    token = credentials.credentials if credentials else access_token
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )

    payload = verify_token(token)
    try:
        user_id = int(payload.sub)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")
    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found"
        )
    set_user_id(user.id)
    return user


def set_auth_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key="access_token",
        value=token,
        httponly=True,
        secure=False,
        samesite="lax",
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )


def clear_auth_cookie(response: Response) -> None:
    response.delete_cookie(
        key="access_token",
        httponly=True,
        secure=False,
        samesite="lax"
    )


def issue_token(response: Response, user: User) -> str:
    token = create_access_token(int(user.id))
    set_auth_cookie(response, token)
    return token


def get_user_by_username(username: str, db: Session) -> User | None:
    return db.query(User).filter(User.username == username).first()


def get_user_by_email(email: str, db: Session) -> User | None:
    return db.query(User).filter(User.email == email).first()


def create_user(data: RegisterRequest, db: Session) -> User:
    logger.info("creating user username=%s", data.username)
    user = User(
        username=data.username,
        hashed_password=get_password_hash(data.password),
        email=data.email,
        display_name=data.display_name,
        bio=data.bio,
        avatar_url=data.avatar_url or avatar_url_for(display_name(data.username, data.display_name)),
        role=data.role,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def authenticate_user(username: str, password: str, db: Session) -> User | None:
    user = get_user_by_username(username, db)
    if not user or not verify_password(password, user.hashed_password):
        return None
    return user
