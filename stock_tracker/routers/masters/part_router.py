# stock_tracker/routers/masters/part_router.py

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from stock_tracker.core.db import get_db
from stock_tracker.schemas.masters.part_schemas import (
    PartCreate,
    PartUpdate,
    PartOut,
    PartListData,
)
from stock_tracker.services.masters.part_service import (
    create_part,
    list_parts,
    get_part,
    update_part,
    delete_part,
)
from stock_tracker.utils.response import APIResponse, success_response
from stock_tracker.utils.logger import get_logger

router = APIRouter(prefix="/parts", tags=["Parts"])
logger = get_logger(__name__)


@router.post("/", response_model=APIResponse[PartOut])
async def create_part_api(
    payload: PartCreate,
    db: AsyncSession = Depends(get_db),
):
    logger.info("Create part", extra={"part_number": payload.part_number})
    part = await create_part(db, payload)
    return success_response("Part created successfully", part)


@router.get("/", response_model=APIResponse[PartListData])
async def list_parts_api(
    db: AsyncSession = Depends(get_db),
    search: str | None = Query(None, description="Search by part number, name or running number"),
):
    items = await list_parts(db, search=search)
    return success_response(
        "Parts fetched successfully",
        PartListData(total=len(items), items=items),
    )


@router.get("/{part_id}", response_model=APIResponse[PartOut])
async def get_part_api(
    part_id: int,
    db: AsyncSession = Depends(get_db),
):
    part = await get_part(db, part_id)
    return success_response("Part fetched successfully", part)


@router.patch("/{part_id}", response_model=APIResponse[PartOut])
async def update_part_api(
    part_id: int,
    payload: PartUpdate,
    db: AsyncSession = Depends(get_db),
):
    logger.info("Update part", extra={"part_id": part_id})
    part = await update_part(db, part_id, payload)
    return success_response("Part updated successfully", part)


@router.delete("/{part_id}", response_model=APIResponse[dict])
async def delete_part_api(
    part_id: int,
    db: AsyncSession = Depends(get_db),
):
    logger.info("Delete part", extra={"part_id": part_id})
    await delete_part(db, part_id)
    return success_response("Part deleted successfully", {"id": part_id})
