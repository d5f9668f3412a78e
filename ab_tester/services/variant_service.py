"""Service for variants (create + fetch by id)"""
import logging

from sqlalchemy.orm import Session

from ab_tester.database import translate_errors
from ab_tester.errors import NotFoundError
from ab_tester.models import Variant
from ab_tester.schemas import VariantCreate
from ab_tester.utils.ids import parse_id

logger = logging.getLogger(__name__)


def create_variant(db: Session, variant_data: VariantCreate) -> Variant:
    """
    Insert a new variant and return it with its generated id.

    Nothing is validated here beyond what the request schema already did,
    the NOT NULL on name is left to the datastore.
    """
    variant = Variant(
        name=variant_data.name,
        description=variant_data.description,
        percent=variant_data.percent
    )

    with translate_errors(db, "insert variant"):
        db.add(variant)
        db.commit()
        db.refresh(variant)

    logger.info(f"Created variant {variant.id} ({variant.name}, {variant.percent}%)")
    return variant


def get_variant_by_id(db: Session, variant_id: str) -> Variant:
    """Get variant by ID, raises NotFoundError if there is none"""
    parsed_id = parse_id(variant_id)
    if parsed_id is None:
        raise NotFoundError("Variant not found")

    with translate_errors(db, "select variant"):
        variant = db.query(Variant).filter(Variant.id == parsed_id).first()

    if not variant:
        raise NotFoundError("Variant not found")

    return variant
