import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from airline_ops.exceptions import ConflictError

logger = logging.getLogger(__name__)


def commit_or_conflict(db: Session, message: str, on_integrity_error=None):
    """Commit the session, turning a unique-constraint violation into ``ConflictError``.

    The application pre-checks only give friendly messages early; the database
    constraints are what actually hold under concurrent writers. When a commit
    trips one of them the transaction is rolled back and ``on_integrity_error``
    (if given) may raise a more specific error before the conflict is reported.
    """
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning("Integrity violation at commit: %s", exc.orig)
        if on_integrity_error is not None:
            on_integrity_error()
        raise ConflictError(message) from exc
