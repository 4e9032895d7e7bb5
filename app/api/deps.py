# app/api/deps.py
from typing import Optional

from fastapi import Depends, HTTPException, status, Request
from fastapi.security import OAuth2PasswordBearer

from app.core.security import decode_access_token
from app.database import db, FileBackedDB
from app.db.repositories import CartRepository, ProductRepository, UserRepository
from app.models.user import User
from app.services.cart import CartService

OAUTH2_TOKEN_URL = "/api/auth/token"

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=OAUTH2_TOKEN_URL, auto_error=False)


def get_db() -> FileBackedDB:
    """
    Dependency that returns the file-backed DB object.
    Usage:
        db = Depends(get_db)
    """
    return db


def get_user_repository(db: FileBackedDB = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


def get_product_repository(db: FileBackedDB = Depends(get_db)) -> ProductRepository:
    return ProductRepository(db)


def get_cart_service(db: FileBackedDB = Depends(get_db)) -> CartService:
    return CartService(CartRepository(db), ProductRepository(db), UserRepository(db))


async def get_current_user(
    request: Request,
    token: Optional[str] = Depends(oauth2_scheme),
    users: UserRepository = Depends(get_user_repository),
) -> User:
    """
    Resolve the current user from the Authorization header (Bearer) or the
    'access_token' cookie. The token subject is the user id. Raises 401 if
    not authenticated.
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Please authenticate",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if not token:
        token = request.cookies.get("access_token")
    if not token:
        raise credentials_exception

    user_id = decode_access_token(token)
    if not user_id:
        raise credentials_exception

    user = users.get(user_id)
    if user is None:
        raise credentials_exception
    return user
