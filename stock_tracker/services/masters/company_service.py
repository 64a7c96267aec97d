from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, desc, or_
from sqlalchemy.exc import IntegrityError

from stock_tracker.models.masters.company_models import Company
from stock_tracker.schemas.masters.company_schemas import (
    CompanyCreate,
    CompanyUpdate,
    CompanyOut,
)
from stock_tracker.services.masters.supplier_service import get_supplier_or_404
from stock_tracker.core.exceptions import AppException
from stock_tracker.constants.error_codes import ErrorCode
from stock_tracker.utils.store_helpers import commit_or_fail
from stock_tracker.utils.logger import get_logger

logger = get_logger(__name__)


def _map_company(company: Company) -> CompanyOut:
    return CompanyOut(
        id=company.id,
        company_code=company.company_code,
        company_name=company.company_name,
        gst_number=company.gst_number,
        contact_number=company.contact_number,
        address=company.address,
        supplier_id=company.supplier_id,
        created_at=company.created_at,
        updated_at=company.updated_at,
    )


def _code_exists() -> AppException:
    return AppException(
        409,
        "Company ID already exists",
        ErrorCode.COMPANY_CODE_EXISTS,
    )


async def get_company_or_404(db: AsyncSession, company_id: int) -> Company:
    company = await db.get(Company, company_id)
    if not company:
        raise AppException(
            404,
            "Company not found",
            ErrorCode.COMPANY_NOT_FOUND,
        )
    return company


# ---------------- CREATE ----------------
async def create_company(db: AsyncSession, payload: CompanyCreate) -> CompanyOut:
    await get_supplier_or_404(db, payload.supplier_id)

    exists = await db.scalar(
        select(Company.id).where(Company.company_code == payload.company_code)
    )
    if exists:
        raise _code_exists()

    company = Company(**payload.model_dump())
    db.add(company)

    try:
        await db.flush()
        await commit_or_fail(db, "create_company")
    except IntegrityError:
        await db.rollback()
        raise _code_exists()

    await db.refresh(company)
    logger.info(
        "Company created",
        extra={"company_id": company.id, "supplier_id": company.supplier_id},
    )
    return _map_company(company)


# ---------------- GET / LIST ----------------
async def get_company(db: AsyncSession, company_id: int) -> CompanyOut:
    return _map_company(await get_company_or_404(db, company_id))


async def list_companies(
    db: AsyncSession,
    search: Optional[str] = None,
    supplier_id: Optional[int] = None,
) -> List[CompanyOut]:
    filters = []

    if search:
        filters.append(
            or_(
                Company.company_name.ilike(f"%{search}%"),
                Company.company_code.ilike(f"%{search}%"),
                Company.gst_number.ilike(f"%{search}%"),
            )
        )

    if supplier_id is not None:
        filters.append(Company.supplier_id == supplier_id)

    result = await db.execute(
        select(Company)
        .where(*filters)
        .order_by(desc(Company.created_at), desc(Company.id))
    )
    return [_map_company(c) for c in result.scalars().all()]


# ---------------- UPDATE ----------------
async def update_company(
    db: AsyncSession,
    company_id: int,
    payload: CompanyUpdate,
) -> CompanyOut:
    company = await get_company_or_404(db, company_id)

    updates = payload.model_dump(exclude_unset=True, exclude_none=True)
    if not updates:
        raise AppException(
            400,
            "No changes detected",
            ErrorCode.VALIDATION_ERROR,
        )

    # earlier dispatches keep the supplier_id they were created with
    if "supplier_id" in updates and updates["supplier_id"] != company.supplier_id:
        await get_supplier_or_404(db, updates["supplier_id"])

    if "company_code" in updates and updates["company_code"] != company.company_code:
        exists = await db.scalar(
            select(Company.id).where(
                Company.company_code == updates["company_code"],
                Company.id != company_id,
            )
        )
        if exists:
            raise _code_exists()

    for field, value in updates.items():
        setattr(company, field, value)

    try:
        await db.flush()
        await commit_or_fail(db, "update_company")
    except IntegrityError:
        await db.rollback()
        raise _code_exists()

    await db.refresh(company)
    logger.info("Company updated", extra={"company_id": company_id, "fields": sorted(updates)})
    return _map_company(company)


# ---------------- DELETE ----------------
async def delete_company(db: AsyncSession, company_id: int) -> None:
    company = await get_company_or_404(db, company_id)
    await db.delete(company)
    await commit_or_fail(db, "delete_company")
    logger.info("Company deleted", extra={"company_id": company_id})
