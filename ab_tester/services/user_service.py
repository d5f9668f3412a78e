"""Service for users - each user points at exactly one variant"""
import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from ab_tester.database import translate_errors
from ab_tester.errors import NotFoundError
from ab_tester.models import User, Variant
from ab_tester.schemas import UserCreate, UserDetailResponse, VariantResponse
from ab_tester.utils.ids import parse_id

logger = logging.getLogger(__name__)


def create_user(db: Session, user_data: UserCreate) -> User:
    """
    Create a user assigned to an existing variant.

    The foreign key is the only business rule: an unknown variant_id makes
    the insert fail and comes back as ConstraintViolationError.
    """
    user = User(
        user_id=user_data.user_id,
        variant_id=user_data.variant_id
    )

    with translate_errors(db, "insert user"):
        db.add(user)
        db.commit()
        db.refresh(user)

    logger.info(f"Created user {user.id} in variant {user.variant_id}")
    return user


def get_user_by_id(db: Session, user_id: str) -> UserDetailResponse:
    """Fetch a user left-joined with its variant, in one query."""
    parsed_id = parse_id(user_id)
    if parsed_id is None:
        raise NotFoundError("User not found")

    stmt = (
        select(
            User.id,
            User.user_id,
            User.variant_id,
            Variant.id.label("variant_pk"),
            Variant.name.label("variant_name"),
            Variant.description.label("variant_description"),
            Variant.percent.label("variant_percent"),
        )
        .outerjoin(Variant, User.variant_id == Variant.id)
        .where(User.id == parsed_id)
    )

    with translate_errors(db, "select user"):
        row = db.execute(stmt).one_or_none()

    if row is None:
        raise NotFoundError("User not found")

    # Left join - variant columns are all NULL if the variant row is gone
    variant = None
    if row.variant_pk is not None:
        variant = VariantResponse(
            id=row.variant_pk,
            name=row.variant_name,
            description=row.variant_description,
            percent=row.variant_percent
        )

    return UserDetailResponse(
        id=row.id,
        user_id=row.user_id,
        variant_id=row.variant_id,
        variant=variant
    )
