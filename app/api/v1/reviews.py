from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.database import get_db
from app.api.deps import get_current_user
from app.models.user import User
from app.schemas.review import ReviewCreate, ReviewListResponse, ReviewResponse
from app.services.review_service import ReviewService
import uuid

router = APIRouter()
review_service = ReviewService()


@router.get("/{user_id}", response_model=ReviewListResponse)
async def get_user_reviews(user_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    """Get reviews a user has received (public)"""
    reviews, average = await review_service.list_reviews(db, user_id)
    return {
        "success": True,
        "count": len(reviews),
        "average_rating": average,
        "reviews": reviews,
    }


@router.post("", response_model=ReviewResponse, status_code=status.HTTP_201_CREATED)
async def create_review(
    review_data: ReviewCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Review the other party of a completed swap"""
    review = await review_service.create_review(db, current_user.id, review_data)
    await db.commit()
    return {"success": True, "review": review}
