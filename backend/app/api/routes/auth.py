"""
Authentication routes for signup, login, and logout.
"""
import logging
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from app.core.config import settings
from app.core.errors import BadRequestError, UnauthorizedError
from app.core.security import verify_password, get_password_hash, create_access_token
from app.db.session import get_db
from app.schemas.common import MessageResponse
from app.schemas.user import UserCreate, UserLogin, Token, UserResponse
from app.models.user import User

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def signup(user_data: UserCreate, db: Session = Depends(get_db)):
    """Register a new user."""
    if db.query(User).filter(User.username == user_data.username).first():
        raise BadRequestError("Username already exists")

    if db.query(User).filter(User.email == user_data.email).first():
        raise BadRequestError("Email already exists")

    new_user = User(
        username=user_data.username,
        name=user_data.name,
        email=user_data.email,
        hashed_password=get_password_hash(user_data.password)
    )
    db.add(new_user)
    db.commit()
    db.refresh(new_user)
    logger.info("User %s signed up", new_user.id)

    return new_user


@router.post("/login", response_model=Token)
async def login(credentials: UserLogin, response: Response, db: Session = Depends(get_db)):
    """Login, returning a bearer token and setting the session cookie."""
    user = db.query(User).filter(User.username == credentials.username).first()

    if not user or not verify_password(credentials.password, user.hashed_password):
        raise UnauthorizedError("Incorrect username or password")

    if not user.is_active:
        raise UnauthorizedError("User account is inactive")

    access_token = create_access_token(user.id)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=access_token,
        max_age=settings.ACCESS_TOKEN_EXPIRE_DAYS * 24 * 3600,
        httponly=True,
        samesite="lax",
        secure=not settings.DEBUG,
    )

    return {"access_token": access_token, "token_type": "bearer"}


@router.post("/logout", response_model=MessageResponse)
async def logout(response: Response):
    """Logout by clearing the session cookie."""
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return {"message": "Logged out successfully"}
