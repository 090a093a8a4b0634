from fastapi import APIRouter, Depends, HTTPException, Response, Cookie
from sqlalchemy.ext.asyncio import AsyncSession
from groupledger.db.session import get_db
from groupledger.schemas.user import UserCreate, UserOut, UserLogin, LoginOut
from groupledger.models.user import User
from groupledger.services.user_service import create_user, get_user_by_id, store_refresh_token
from groupledger.core.dependencies import authenticate_user, get_current_user
from groupledger.core.jwt_config import create_access_token, create_refresh_token, decode_token

router = APIRouter()

def set_auth_cookies(response: Response, access: str, refresh: str):
    response.set_cookie(
        key="refresh_token",
        value=refresh,
        httponly=True,
        secure=False,
        samesite="lax"
    )

    response.set_cookie(
        key="access_token",
        value=access,
        httponly=True,
        secure=False,
        samesite="lax"
    )

@router.post("/register", response_model=UserOut)
async def register_user(data:UserCreate, db:AsyncSession = Depends(get_db)):
    try:
        user = await create_user(db, data)
        return user
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

@router.post("/login", response_model=LoginOut)
async def login_user(data:UserLogin, response : Response, db:AsyncSession = Depends(get_db)):
    user = await authenticate_user(db, data.email, data.password)

    if not user:
        raise HTTPException(status_code=401, detail="Invalid email or password")

    access = create_access_token({"sub": user.id})
    refresh = create_refresh_token({"sub": user.id})

    user = await store_refresh_token(db, user, refresh)
    set_auth_cookies(response, access, refresh)

    return {"user": user, "access_token": access}

@router.get("/me", response_model=UserOut)
async def read_users_me(current_user: User = Depends(get_current_user)):
    return UserOut.model_validate(current_user)

@router.post("/refresh", response_model=LoginOut)
async def refresh_token(
    response: Response,
    db: AsyncSession = Depends(get_db),
    refresh_cookie: str | None = Cookie(None, alias="refresh_token")
):
    if refresh_cookie is None:
        raise HTTPException(status_code=401, detail="Refresh token missing")

    payload = decode_token(refresh_cookie)
    user_id = payload.get("sub")

    if payload.get("type") != "refresh" or user_id is None:
        raise HTTPException(401, "Invalid refresh token")

    user = await get_user_by_id(db, user_id)

    if not user:
        raise HTTPException(401, "User not found")

    if user.refresh_token != refresh_cookie:
        raise HTTPException(401, "Refresh token revoked or rotated")

    new_access = create_access_token({"sub": user.id})
    new_refresh = create_refresh_token({"sub" : user.id})

    user = await store_refresh_token(db, user, new_refresh)
    set_auth_cookies(response, new_access, new_refresh)

    return {"user": user, "access_token": new_access}

@router.post("/logout")
async def logout_user(response: Response, db: AsyncSession = Depends(get_db), current_user : User = Depends(get_current_user)):
    await store_refresh_token(db, current_user, None)

    response.delete_cookie("refresh_token")
    response.delete_cookie("access_token")
    return {"message":"Logged out"}
