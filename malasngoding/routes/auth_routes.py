from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from malasngoding.config import get_db
from malasngoding.schemas.auth_schemas import LoginRequest, LoginResponse, LogoutResponse, RegisterRequest
from malasngoding.schemas.user_schemas import UserResponse
from malasngoding.utils.auth import (
    authenticate_user,
    clear_auth_cookie,
    create_user,
    get_user_by_email,
    get_user_by_username,
    issue_token,
)
from malasngoding.utils.logger import get_logger

logger = get_logger(__name__)

auth_routes = APIRouter()


@auth_routes.post("/register", status_code=status.HTTP_201_CREATED, response_model=UserResponse)
def register(request: RegisterRequest, db: Session = Depends(get_db)) -> UserResponse:
    """Register a new user. The response never includes the password."""
    if get_user_by_username(request.username, db):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Username already exists")
    if get_user_by_email(request.email, db):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already exists")

    user = create_user(request, db)
    return UserResponse.model_validate(user)


@auth_routes.post("/login", response_model=LoginResponse)
def login(request: LoginRequest, response: Response, db: Session = Depends(get_db)) -> LoginResponse:
    """Authenticate and set an HTTP-only access_token cookie; the token is also returned."""
    if not request.username or not request.password:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Username and password are required")

    user = authenticate_user(request.username, request.password, db)
    if user is None:
        logger.info("login failed username=%s", request.username)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    token = issue_token(response, user)
    return LoginResponse(user=UserResponse.model_validate(user), access_token=token)


@auth_routes.post("/logout", response_model=LogoutResponse)
async def logout(response: Response) -> LogoutResponse:
    """Clear the authentication cookie."""
    clear_auth_cookie(response)
    return LogoutResponse(message="Logout successful")
