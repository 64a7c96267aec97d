# stock_tracker/services/masters/part_service.py

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, desc, or_
from sqlalchemy.exc import IntegrityError

from stock_tracker.models.masters.part_models import Part
from stock_tracker.schemas.masters.part_schemas import (
    PartCreate,
    PartUpdate,
    PartOut,
)
from stock_tracker.core.exceptions import AppException
from stock_tracker.constants.error_codes import ErrorCode
from stock_tracker.utils.store_helpers import commit_or_fail
from stock_tracker.utils.logger import get_logger

logger = get_logger(__name__)


def _map_part(part: Part) -> PartOut:
    return PartOut(
        id=part.id,
        part_number=part.part_number,
        running_number=part.running_number,
        part_name=part.part_name,
        created_at=part.created_at,
        updated_at=part.updated_at,
    )


def _part_number_exists() -> AppException:
    return AppException(
        409,
        "Part number already exists",
        ErrorCode.PART_NUMBER_EXISTS,
    )


async def get_part_or_404(db: AsyncSession, part_id: int) -> Part:
    part = await db.get(Part, part_id)
    if not part:
        raise AppException(
            404,
            "Part not found",
            ErrorCode.PART_NOT_FOUND,
        )
    return part


# ---------------- CREATE ----------------
async def create_part(db: AsyncSession, payload: PartCreate) -> PartOut:
    exists = await db.scalar(
        select(Part.id).where(Part.part_number == payload.part_number)
    )
    if exists:
        raise _part_number_exists()

    part = Part(**payload.model_dump())
    db.add(part)

    try:
        await db.flush()
        await commit_or_fail(db, "create_part")
    except IntegrityError:
        await db.rollback()
        raise _part_number_exists()

    await db.refresh(part)
    logger.info("Part created", extra={"part_id": part.id, "part_number": part.part_number})
    return _map_part(part)


# ---------------- LIST ----------------
async def list_parts(db: AsyncSession, search: Optional[str] = None) -> List[PartOut]:
    filters = []
    if search:
        filters.append(
            or_(
                Part.part_number.ilike(f"%{search}%"),
                Part.part_name.ilike(f"%{search}%"),
                Part.running_number.ilike(f"%{search}%"),
            )
        )

    result = await db.execute(
        select(Part)
        .where(*filters)
        .order_by(desc(Part.created_at), desc(Part.id))
    )
    return [_map_part(p) for p in result.scalars().all()]


# ---------------- GET ----------------
async def get_part(db: AsyncSession, part_id: int) -> PartOut:
    return _map_part(await get_part_or_404(db, part_id))


# ---------------- UPDATE ----------------
async def update_part(db: AsyncSession, part_id: int, payload: PartUpdate) -> PartOut:
    part = await get_part_or_404(db, part_id)

    updates = payload.model_dump(exclude_unset=True, exclude_none=True)
    if not updates:
        raise AppException(
            400,
            "No changes detected",
            ErrorCode.VALIDATION_ERROR,
        )

    if "part_number" in updates and updates["part_number"] != part.part_number:
        exists = await db.scalar(
            select(Part.id).where(
                Part.part_number == updates["part_number"],
                Part.id != part_id,
            )
        )
        if exists:
            raise _part_number_exists()

    for field, value in updates.items():
        setattr(part, field, value)

    try:
        await db.flush()
        await commit_or_fail(db, "update_part")
    except IntegrityError:
        await db.rollback()
        raise _part_number_exists()

    await db.refresh(part)
    logger.info("Part updated", extra={"part_id": part_id, "fields": sorted(updates)})
    return _map_part(part)


# ---------------- DELETE ----------------
async def delete_part(db: AsyncSession, part_id: int) -> None:
    # transactions keep their part_id; the ledger drops rows it cannot resolve
    part = await get_part_or_404(db, part_id)
    await db.delete(part)
    await commit_or_fail(db, "delete_part")
    logger.info("Part deleted", extra={"part_id": part_id})
