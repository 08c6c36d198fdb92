from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError
from app.core.database import get_db
from app.core.security import verify_password, get_password_hash, create_access_token, create_refresh_token, verify_token
from app.models.user import User
from app.repositories.user_repository import UserRepository
from app.schemas.auth import AuthResponse, RefreshTokenRequest, UserCreate, UserLogin
from app.schemas.user import CurrentUserResponse
from app.api.deps import get_current_user
import structlog
import uuid

router = APIRouter()
user_repo = UserRepository()
logger = structlog.get_logger(__name__)


def _issue_tokens(user: User) -> dict:
    return {
        "success": True,
        "access_token": create_access_token(data={"sub": str(user.id)}),
        "refresh_token": create_refresh_token(data={"sub": str(user.id)}),
        "token_type": "bearer",
        "user": user,
    }


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(user_data: UserCreate, db: AsyncSession = Depends(get_db)):
    """Register a new user"""
    user_exists = HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="User already exists"
    )
    if await user_repo.get_by_email(db, user_data.email):
        raise user_exists

    try:
        user = await user_repo.create(
            db,
            {
                "id": uuid.uuid4(),
                "name": user_data.name,
                "email": user_data.email,
                "password_hash": get_password_hash(user_data.password),
            },
        )
    except IntegrityError:
        # A concurrent registration took the email after the lookup above
        raise user_exists
    await db.commit()

    logger.info("user_registered", user_id=str(user.id))
    return _issue_tokens(user)


@router.post("/login", response_model=AuthResponse)
async def login(user_credentials: UserLogin, db: AsyncSession = Depends(get_db)):
    """Authenticate user and return tokens"""
    user = await user_repo.get_by_email(db, user_credentials.email)

    if not user or not verify_password(user_credentials.password, user.password_hash):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return _issue_tokens(user)


@router.post("/refresh", response_model=AuthResponse)
async def refresh_token(token_data: RefreshTokenRequest, db: AsyncSession = Depends(get_db)):
    """Exchange a refresh token for a new token pair"""
    user_id = verify_token(token_data.refresh_token, "refresh")
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid refresh token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    # Verify user still exists
    user = await user_repo.get(db, uuid.UUID(user_id))
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found"
        )

    return _issue_tokens(user)


@router.get("/me", response_model=CurrentUserResponse)
async def get_me(current_user: User = Depends(get_current_user)):
    """Get the current logged-in user"""
    return {"success": True, "user": current_user}
