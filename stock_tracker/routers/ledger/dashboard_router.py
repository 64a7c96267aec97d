from fastapi import APIRouter, Depends

from stock_tracker.routers.dependencies import get_snapshot
from stock_tracker.schemas.ledger.dashboard_schemas import DashboardData
from stock_tracker.services.ledger.dashboard import build_dashboard
from stock_tracker.services.ledger.snapshot import InventorySnapshot
from stock_tracker.utils.response import APIResponse, success_response

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("", response_model=APIResponse[DashboardData])
async def get_dashboard_api(
    snapshot: InventorySnapshot = Depends(get_snapshot),
):
    return success_response("Dashboard fetched successfully", build_dashboard(snapshot))
