# stock_tracker/utils/store_helpers.py

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from stock_tracker.core.exceptions import StoreOperationError
from stock_tracker.utils.logger import get_logger

logger = get_logger(__name__)


async def commit_or_fail(db: AsyncSession, operation: str) -> None:
    """Commit the session, turning driver/database failures into a 503.

    Integrity errors propagate unchanged so callers can map them to a
    business conflict. Nothing is retried.
    """
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise
    except SQLAlchemyError:
        logger.exception("Store operation failed", extra={"operation": operation})
        await db.rollback()
        raise StoreOperationError(operation)
