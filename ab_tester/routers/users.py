"""User endpoints.

Reading a user also returns its variant; creating one does not.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from ab_tester.database import get_db
from ab_tester.schemas import ErrorResponse, UserCreate, UserDetailResponse, UserResponse
from ab_tester.services.user_service import create_user, get_user_by_id

router = APIRouter(prefix="/api/user", tags=["users"])


@router.post(
    "",
    response_model=UserResponse,
    status_code=201,
    responses={400: {"model": ErrorResponse}},
)
def create_user_endpoint(
    user_data: UserCreate,
    db: Session = Depends(get_db)
):
    """
    Create a user assigned to an existing variant.

    400 if variant_id does not reference a variant.
    """
    return create_user(db, user_data)


@router.get(
    "/{user_id}",
    response_model=UserDetailResponse,
    responses={404: {"model": ErrorResponse}},
)
def get_user_endpoint(
    user_id: str,
    db: Session = Depends(get_db)
):
    """
    Get a user together with its variant.

    The variant fields are nested under "variant" ({id, name, description,
    percent}), not flattened into the user. "variant" is null if the variant
    row is missing. POST /api/user does not include it.
    """
    return get_user_by_id(db, user_id)
