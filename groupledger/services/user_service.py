import logging
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from groupledger.models.user import User
from groupledger.schemas.user import UserCreate
from groupledger.core.security import hash_password

logger = logging.getLogger(__name__)

async def get_user_by_email(db: AsyncSession, email:str):
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()

async def get_user_by_id(db: AsyncSession, id:str):
    result = await db.execute(select(User).where(User.id == id))
    return result.scalar_one_or_none()

async def create_user(db: AsyncSession, data: UserCreate):
    existing = await get_user_by_email(db, data.email)
    if existing:
        raise ValueError("User already exists")

    user = User(
        email = data.email,
        name = data.name,
        password_hash = hash_password(data.password)
    )

    db.add(user)
    await db.commit()
    await db.refresh(user)

    logger.info("Registered user %s", user.id)
    return user

async def store_refresh_token(db: AsyncSession, user: User, token: str | None):
    user.refresh_token = token
    await db.commit()
    await db.refresh(user)
    return user
