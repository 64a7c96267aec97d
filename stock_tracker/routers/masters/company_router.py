from fastapi import APIRouter, Depends, Query
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from stock_tracker.core.db import get_db
from stock_tracker.schemas.masters.company_schemas import (
    CompanyCreate,
    CompanyUpdate,
    CompanyOut,
    CompanyListData,
)
from stock_tracker.services.masters.company_service import (
    create_company,
    get_company,
    list_companies,
    update_company,
    delete_company,
)
from stock_tracker.utils.response import APIResponse, success_response
from stock_tracker.utils.logger import get_logger

router = APIRouter(prefix="/companies", tags=["Companies"])
logger = get_logger(__name__)


@router.post("/", response_model=APIResponse[CompanyOut])
async def create_company_api(
    payload: CompanyCreate,
    db: AsyncSession = Depends(get_db),
):
    logger.info(
        "Create company",
        extra={"company_code": payload.company_code, "supplier_id": payload.supplier_id},
    )
    company = await create_company(db, payload)
    return success_response("Company created successfully", company)


@router.get("/", response_model=APIResponse[CompanyListData])
async def list_companies_api(
    db: AsyncSession = Depends(get_db),
    search: Optional[str] = Query(None, description="Search by name, company ID or GST number"),
    supplier_id: Optional[int] = Query(None),
):
    items = await list_companies(db, search=search, supplier_id=supplier_id)
    return success_response(
        "Companies fetched successfully",
        CompanyListData(total=len(items), items=items),
    )


@router.get("/{company_id}", response_model=APIResponse[CompanyOut])
async def get_company_api(
    company_id: int,
    db: AsyncSession = Depends(get_db),
):
    company = await get_company(db, company_id)
    return success_response("Company fetched successfully", company)


@router.patch("/{company_id}", response_model=APIResponse[CompanyOut])
async def update_company_api(
    company_id: int,
    payload: CompanyUpdate,
    db: AsyncSession = Depends(get_db),
):
    logger.info("Update company", extra={"company_id": company_id})
    company = await update_company(db, company_id, payload)
    return success_response("Company updated successfully", company)


@router.delete("/{company_id}", response_model=APIResponse[dict])
async def delete_company_api(
    company_id: int,
    db: AsyncSession = Depends(get_db),
):
    logger.info("Delete company", extra={"company_id": company_id})
    await delete_company(db, company_id)
    return success_response("Company deleted successfully", {"id": company_id})
