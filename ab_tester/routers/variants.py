"""Variant endpoints (create + read, nothing else)."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from ab_tester.database import get_db
from ab_tester.schemas import ErrorResponse, VariantCreate, VariantResponse
from ab_tester.services.variant_service import create_variant, get_variant_by_id

# NOTE: prefix means all routes in here start with /api/variant
router = APIRouter(prefix="/api/variant", tags=["variants"])


@router.post(
    "",
    response_model=VariantResponse,
    status_code=201,
    responses={400: {"model": ErrorResponse}},
)
def create_variant_endpoint(
    variant_data: VariantCreate,
    db: Session = Depends(get_db)
):
    """Create a new variant. The generated id is returned with the rest of the fields."""
    return create_variant(db, variant_data)


@router.get(
    "/{variant_id}",
    response_model=VariantResponse,
    responses={404: {"model": ErrorResponse}},
)
def get_variant_endpoint(
    variant_id: str,
    db: Session = Depends(get_db)
):
    """Get variant by id."""
    # service raises NotFoundError, error handlers turn it into a 404
    return get_variant_by_id(db, variant_id)
