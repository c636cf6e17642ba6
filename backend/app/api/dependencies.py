"""
Shared route dependencies: current user and query-string validation.
"""
from typing import Callable, Optional, Type, TypeVar
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel, ValidationError
from sqlalchemy.orm import Session
from app.core.config import settings
from app.core.errors import BadRequestError, UnauthorizedError
from app.core.security import decode_access_token
from app.db.session import get_db
from app.models.user import User

bearer_scheme = HTTPBearer(auto_error=False)

QueryModel = TypeVar("QueryModel", bound=BaseModel)


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db)
) -> User:
    """Resolve the user from a bearer token or the session cookie."""
    token = credentials.credentials if credentials else request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token:
        raise UnauthorizedError()

    user_id = decode_access_token(token)
    if not user_id:
        raise UnauthorizedError()

    user = db.query(User).filter(User.id == user_id).first()
    if not user or not user.is_active:
        raise UnauthorizedError()

    return user


def query_params(schema: Type[QueryModel]) -> Callable[[Request], QueryModel]:
    """
    Build a dependency that validates the whole query string against ``schema``.

    Any invalid parameter fails the request; valid filters are never applied
    on their own.
    """
    def dependency(request: Request) -> QueryModel:
        try:
            return schema.model_validate(dict(request.query_params))
        except ValidationError:
            raise BadRequestError("Invalid query parameters")

    return dependency
