import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from mentorhub.exceptions import ValidationError

logger = logging.getLogger(__name__)


def commit_or_invalid(db: Session, instance=None, message: str = "Invalid input"):
    """Commit the unit of work; constraint violations become ValidationError."""
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning("Integrity error on commit: %s", exc.orig)
        raise ValidationError(message) from exc
    except Exception:
        db.rollback()
        raise

    if instance is not None:
        db.refresh(instance)
    return instance
