# app/api/schemas/user.py
from pydantic import BaseModel, ConfigDict, EmailStr, Field
from typing import Optional


class UserCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=8)


class UserOut(BaseModel):
    id: Optional[str] = Field(None, alias="_id")
    name: str
    email: str
    wallet_money: float = Field(..., alias="walletMoney")
    address: str
    created_at: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class AddressUpdate(BaseModel):
    address: str = Field(..., min_length=20)


class AddressOut(BaseModel):
    address: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"


class RegisterResponse(BaseModel):
    user: UserOut
    tokens: TokenResponse
