"""Account resolution from Supabase-issued access tokens."""

from dataclasses import dataclass
from typing import Annotated, Any, Literal, Optional
from uuid import UUID

import jwt
from fastapi import Depends, Header, HTTPException

from app.config import SUPABASE_JWT_AUD, SUPABASE_JWT_SECRET

AccountRole = Literal["parent", "creator"]


@dataclass
class Account:
    user_id: UUID
    email: Optional[str]
    role: AccountRole


def _parse_bearer_token(authorization: Optional[str]) -> str:
    if not authorization:
        raise HTTPException(status_code=401, detail="Missing authorization token.")
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise HTTPException(status_code=401, detail="Invalid authorization token.")
    return parts[1]


def decode_access_token(token: str) -> dict[str, Any]:
    if not SUPABASE_JWT_SECRET:
        raise RuntimeError("Missing SUPABASE_JWT_SECRET for token verification.")
    try:
        return jwt.decode(
            token,
            SUPABASE_JWT_SECRET,
            algorithms=["HS256"],
            audience=SUPABASE_JWT_AUD or None,
            options={"verify_aud": bool(SUPABASE_JWT_AUD)},
        )
    except jwt.PyJWTError as exc:
        raise HTTPException(status_code=401, detail="Invalid or expired token.") from exc


def account_from_claims(claims: dict[str, Any]) -> Account:
    try:
        user_id = UUID(str(claims.get("sub")))
    except ValueError as exc:
        raise HTTPException(status_code=401, detail="Invalid token subject.") from exc
    metadata = claims.get("user_metadata") or {}
    role = metadata.get("user_type", "parent")
    if role not in ("parent", "creator"):
        raise HTTPException(status_code=403, detail=f"Unknown account type '{role}'.")
    return Account(user_id=user_id, email=claims.get("email"), role=role)


async def get_current_account(authorization: Optional[str] = Header(None)) -> Account:
    token = _parse_bearer_token(authorization)
    return account_from_claims(decode_access_token(token))


CurrentAccount = Annotated[Account, Depends(get_current_account)]


async def require_parent(account: CurrentAccount) -> Account:
    if account.role != "parent":
        raise HTTPException(status_code=403, detail="Parent account required.")
    return account


async def require_creator(account: CurrentAccount) -> Account:
    if account.role != "creator":
        raise HTTPException(status_code=403, detail="Creator account required.")
    return account


ParentAccount = Annotated[Account, Depends(require_parent)]
CreatorAccount = Annotated[Account, Depends(require_creator)]
