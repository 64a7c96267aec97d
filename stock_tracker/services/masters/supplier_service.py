from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, desc, or_
from sqlalchemy.exc import IntegrityError

from stock_tracker.models.masters.supplier_models import Supplier
from stock_tracker.schemas.masters.supplier_schemas import (
    SupplierCreate,
    SupplierUpdate,
    SupplierOut,
)
from stock_tracker.core.exceptions import AppException
from stock_tracker.constants.error_codes import ErrorCode
from stock_tracker.utils.store_helpers import commit_or_fail
from stock_tracker.utils.logger import get_logger

logger = get_logger(__name__)


# =========================
# MAPPER
# =========================
def _map_supplier(supplier: Supplier) -> SupplierOut:
    return SupplierOut(
        id=supplier.id,
        supplier_code=supplier.supplier_code,
        name=supplier.name,
        gst_number=supplier.gst_number,
        contact_number=supplier.contact_number,
        address=supplier.address,
        created_at=supplier.created_at,
        updated_at=supplier.updated_at,
    )


def _code_exists() -> AppException:
    return AppException(
        409,
        "Supplier ID already exists",
        ErrorCode.SUPPLIER_CODE_EXISTS,
    )


async def get_supplier_or_404(db: AsyncSession, supplier_id: int) -> Supplier:
    supplier = await db.get(Supplier, supplier_id)
    if not supplier:
        raise AppException(
            404,
            "Supplier not found",
            ErrorCode.SUPPLIER_NOT_FOUND,
        )
    return supplier


# =========================
# CREATE
# =========================
async def create_supplier(db: AsyncSession, payload: SupplierCreate) -> SupplierOut:
    # ------------------------------------
    # Fast pre-check (UX optimization)
    # ------------------------------------
    exists = await db.scalar(
        select(Supplier.id).where(Supplier.supplier_code == payload.supplier_code)
    )
    if exists:
        raise _code_exists()

    supplier = Supplier(**payload.model_dump())
    db.add(supplier)

    try:
        await db.flush()  # forces INSERT, catches constraint issues early
        await commit_or_fail(db, "create_supplier")
    except IntegrityError:
        await db.rollback()
        raise _code_exists()

    await db.refresh(supplier)
    logger.info(
        "Supplier created",
        extra={"supplier_id": supplier.id, "supplier_code": supplier.supplier_code},
    )
    return _map_supplier(supplier)


# =========================
# GET / LIST
# =========================
async def get_supplier(db: AsyncSession, supplier_id: int) -> SupplierOut:
    return _map_supplier(await get_supplier_or_404(db, supplier_id))


async def list_suppliers(db: AsyncSession, search: Optional[str] = None) -> List[SupplierOut]:
    filters = []

    # 🔍 Search filter
    if search:
        filters.append(
            or_(
                Supplier.name.ilike(f"%{search}%"),
                Supplier.supplier_code.ilike(f"%{search}%"),
                Supplier.gst_number.ilike(f"%{search}%"),
            )
        )

    result = await db.execute(
        select(Supplier)
        .where(*filters)
        .order_by(desc(Supplier.created_at), desc(Supplier.id))
    )
    return [_map_supplier(s) for s in result.scalars().all()]


# =========================
# UPDATE
# =========================
async def update_supplier(
    db: AsyncSession,
    supplier_id: int,
    payload: SupplierUpdate,
) -> SupplierOut:
    current = await get_supplier_or_404(db, supplier_id)

    updates = payload.model_dump(exclude_unset=True, exclude_none=True)
    changes: list[str] = [
        f"{field}: '{getattr(current, field)}' → '{value}'"
        for field, value in updates.items()
        if getattr(current, field) != value
    ]

    if not changes:
        raise AppException(
            400,
            "No changes detected",
            ErrorCode.VALIDATION_ERROR,
        )

    if "supplier_code" in updates and updates["supplier_code"] != current.supplier_code:
        exists = await db.scalar(
            select(Supplier.id).where(
                Supplier.supplier_code == updates["supplier_code"],
                Supplier.id != supplier_id,
            )
        )
        if exists:
            raise _code_exists()

    for field, value in updates.items():
        setattr(current, field, value)

    try:
        await db.flush()
        await commit_or_fail(db, "update_supplier")
    except IntegrityError:
        await db.rollback()
        raise _code_exists()

    await db.refresh(current)
    logger.info(
        "Supplier updated",
        extra={"supplier_id": supplier_id, "changes": ", ".join(changes)},
    )
    return _map_supplier(current)


# =========================
# DELETE
# =========================
async def delete_supplier(db: AsyncSession, supplier_id: int) -> None:
    # companies and transactions keep their supplier_id
    supplier = await get_supplier_or_404(db, supplier_id)
    await db.delete(supplier)
    await commit_or_fail(db, "delete_supplier")
    logger.info("Supplier deleted", extra={"supplier_id": supplier_id})
