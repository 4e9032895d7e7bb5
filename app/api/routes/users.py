import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.api.deps import get_current_user, get_user_repository
from app.api.schemas.user import AddressOut, AddressUpdate, UserOut
from app.db.repositories import UserRepository
from app.models.user import User

router = APIRouter(prefix="/api/users", tags=["users"])

logger = logging.getLogger(__name__)


def _own_user(user_id: str, current_user: User, users: UserRepository) -> User:
    user = users.get(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    if user.email != current_user.email:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="User not authorized to access this resource")
    return user


@router.get("/{user_id}", response_model=None)
def get_user(
    user_id: str,
    q: Optional[str] = Query(None, description="pass 'address' to get only the address"),
    current_user: User = Depends(get_current_user),
    users: UserRepository = Depends(get_user_repository),
):
    """
    Fetch a user. Users can only read their own record.
    With ?q=address only the address is returned.
    """
    user = _own_user(user_id, current_user, users)
    if q == "address":
        return AddressOut(address=user.address)
    return UserOut.model_validate(user.mask_secret())


@router.put("/{user_id}", response_model=AddressOut)
def set_address(
    user_id: str,
    payload: AddressUpdate,
    current_user: User = Depends(get_current_user),
    users: UserRepository = Depends(get_user_repository),
):
    """
    Set the delivery address. Checkout refuses to run until this is done.
    """
    user = _own_user(user_id, current_user, users)
    user.address = payload.address
    if users.save_address(user) is None:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to update address")
    logger.info("Updated address of %s", user.email)
    return {"address": user.address}
