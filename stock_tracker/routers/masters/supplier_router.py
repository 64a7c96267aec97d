from fastapi import APIRouter, Depends, Query
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from stock_tracker.core.db import get_db
from stock_tracker.schemas.masters.supplier_schemas import (
    SupplierCreate,
    SupplierUpdate,
    SupplierOut,
    SupplierListData,
)
from stock_tracker.schemas.masters.company_schemas import CompanyListData
from stock_tracker.services.masters.supplier_service import (
    create_supplier,
    get_supplier,
    get_supplier_or_404,
    list_suppliers,
    update_supplier,
    delete_supplier,
)
from stock_tracker.services.masters.company_service import list_companies
from stock_tracker.utils.response import APIResponse, success_response
from stock_tracker.utils.logger import get_logger

router = APIRouter(prefix="/suppliers", tags=["Suppliers"])
logger = get_logger(__name__)


@router.post("/", response_model=APIResponse[SupplierOut])
async def create_supplier_api(
    payload: SupplierCreate,
    db: AsyncSession = Depends(get_db),
):
    logger.info(
        "Create supplier",
        extra={"supplier_code": payload.supplier_code, "supplier_name": payload.name},
    )

    supplier = await create_supplier(db, payload)
    return success_response("Supplier created successfully", supplier)


@router.get("/{supplier_id}", response_model=APIResponse[SupplierOut])
async def get_supplier_api(
    supplier_id: int,
    db: AsyncSession = Depends(get_db),
):
    supplier = await get_supplier(db, supplier_id)
    return success_response("Supplier fetched successfully", supplier)


@router.get("/{supplier_id}/companies", response_model=APIResponse[CompanyListData])
async def list_supplier_companies_api(
    supplier_id: int,
    db: AsyncSession = Depends(get_db),
):
    await get_supplier_or_404(db, supplier_id)
    items = await list_companies(db, supplier_id=supplier_id)
    return success_response(
        "Companies fetched successfully",
        CompanyListData(total=len(items), items=items),
    )


@router.get("/", response_model=APIResponse[SupplierListData])
async def list_suppliers_api(
    db: AsyncSession = Depends(get_db),
    search: Optional[str] = Query(None, description="Search by name, supplier ID or GST number"),
):
    items = await list_suppliers(db, search=search)
    return success_response(
        "Suppliers fetched successfully",
        SupplierListData(total=len(items), items=items),
    )


@router.patch("/{supplier_id}", response_model=APIResponse[SupplierOut])
async def update_supplier_api(
    supplier_id: int,
    payload: SupplierUpdate,
    db: AsyncSession = Depends(get_db),
):
    logger.info("Update supplier", extra={"supplier_id": supplier_id})

    supplier = await update_supplier(db, supplier_id, payload)
    return success_response("Supplier updated successfully", supplier)


@router.delete("/{supplier_id}", response_model=APIResponse[dict])
async def delete_supplier_api(
    supplier_id: int,
    db: AsyncSession = Depends(get_db),
):
    logger.info("Delete supplier", extra={"supplier_id": supplier_id})

    await delete_supplier(db, supplier_id)
    return success_response("Supplier deleted successfully", {"id": supplier_id})
