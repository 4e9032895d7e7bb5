# app/models/user.py
from __future__ import annotations
from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Optional, Dict, Any

from app.config import settings


@dataclass
class User:
    """
    Domain model for a shopper.
    The FileBackedDB stores values as strings; these helpers normalize/convert types.
    """
    name: str
    email: str
    password_hash: str = ""
    wallet_money: float = settings.DEFAULT_WALLET_MONEY
    address: str = settings.DEFAULT_ADDRESS
    created_at: Optional[datetime] = None
    id: Optional[str] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "User":
        if d is None:
            raise ValueError("Cannot construct User from None")

        # a blank cell is a user saved before wallets existed; garbage is corruption
        wallet_raw = d.get("wallet_money")
        if wallet_raw in (None, ""):
            wallet_money = settings.DEFAULT_WALLET_MONEY
        else:
            try:
                wallet_money = float(wallet_raw)
            except (TypeError, ValueError):
                raise ValueError(f"Invalid wallet_money for user {d.get('email')!r}: {wallet_raw!r}") from None

        created_at_raw = d.get("created_at")
        created_at = None
        if created_at_raw:
            if isinstance(created_at_raw, datetime):
                created_at = created_at_raw
            else:
                try:
                    created_at = datetime.fromisoformat(str(created_at_raw))
                except ValueError:
                    created_at = None

        return cls(
            name=str(d.get("name") or ""),
            email=str(d.get("email") or ""),
            password_hash=str(d.get("password_hash") or ""),
            wallet_money=wallet_money,
            address=str(d.get("address") or settings.DEFAULT_ADDRESS),
            created_at=created_at,
            id=d.get("id") or None,
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Plain dict suitable for writing to the CSV store.
        Note: password_hash is included (necessary for persistence); strip it in APIs.
        """
        out = asdict(self)
        if self.created_at and isinstance(self.created_at, datetime):
            out["created_at"] = self.created_at.isoformat(sep=" ")
        else:
            out["created_at"] = ""
        out["wallet_money"] = float(self.wallet_money)
        return out

    def mask_secret(self) -> Dict[str, Any]:
        """
        Representation safe to expose on API responses (no password_hash).
        """
        d = self.to_dict()
        d.pop("password_hash", None)
        d["walletMoney"] = d.pop("wallet_money")
        d["_id"] = d.pop("id")
        return d

    def has_set_non_default_address(self) -> bool:
        return bool(self.address) and self.address != settings.DEFAULT_ADDRESS
