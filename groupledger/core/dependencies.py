import logging
from fastapi import Depends, HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession
from groupledger.db.session import get_db
from groupledger.core.jwt_config import decode_token, get_token_from_request
from groupledger.services.user_service import get_user_by_id, get_user_by_email
from groupledger.core.security import verify_password

logger = logging.getLogger(__name__)

async def get_current_user(request: Request, db: AsyncSession = Depends(get_db)):
    token = get_token_from_request(request=request)
    payload = decode_token(token)

    if payload.get("type") != "access":
        raise HTTPException(status_code=401, detail="Invalid authentication credentials")

    user_id = payload.get("sub")
    if user_id is None:
        raise HTTPException(status_code=401, detail="Invalid authentication credentials")

    user = await get_user_by_id(db, user_id)

    if user is None:
        logger.info("Token for unknown user %s rejected", user_id)
        raise HTTPException(status_code=401, detail="User not found")

    return user

async def authenticate_user(db:AsyncSession, email:str, password:str):
    user = await get_user_by_email(db, email)
    if not user:
        return None

    if not verify_password(password, user.password_hash):
        return None

    return user
