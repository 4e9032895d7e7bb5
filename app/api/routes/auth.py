# app/api/routes/auth.py
import logging
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, status, Response
from fastapi.security import OAuth2PasswordRequestForm

from app.api.deps import get_user_repository
from app.api.schemas.user import RegisterResponse, TokenResponse, UserCreate
from app.core.security import create_access_token, hash_password, verify_password
from app.db.repositories import UserRepository
from app.models.user import User

router = APIRouter(prefix="/api/auth", tags=["auth"])

logger = logging.getLogger(__name__)


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(payload: UserCreate, users: UserRepository = Depends(get_user_repository)):
    """
    Register a shopper. The password is hashed and stored as 'password_hash';
    wallet and address start at their configured defaults.
    Returns the user plus an access token.
    """
    if users.get_by_email(payload.email) is not None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already taken")

    user = users.create(
        User(
            name=payload.name,
            email=payload.email,
            password_hash=hash_password(payload.password),
            created_at=datetime.utcnow(),
        )
    )
    if user is None:
        # another registration for the same email won the race
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already taken")
    logger.info("Registered user %s", user.email)
    return {"user": user.mask_secret(), "tokens": {"access_token": create_access_token(str(user.id))}}


@router.post("/token", response_model=TokenResponse)
def token(
    response: Response,
    form_data: OAuth2PasswordRequestForm = Depends(),
    users: UserRepository = Depends(get_user_repository),
):
    """
    Token endpoint used by OAuth2PasswordRequestForm clients; `username` is the email.
    Also sets an 'access_token' cookie for browser flows.
    """
    user = users.get_by_email(form_data.username)
    if user is None or not user.password_hash or not verify_password(form_data.password, user.password_hash):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Incorrect email or password")

    access_token = create_access_token(str(user.id))
    response.set_cookie(key="access_token", value=access_token, httponly=True, samesite="lax")
    return {"access_token": access_token, "token_type": "bearer"}
