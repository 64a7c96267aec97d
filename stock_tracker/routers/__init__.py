# stock_tracker/routers/__init__.py

from .masters.part_router import router as part_router
from .masters.supplier_router import router as supplier_router
from .masters.company_router import router as company_router

from .transactions.warehouse_dispatch_router import router as warehouse_dispatch_router
from .transactions.company_dispatch_router import router as company_dispatch_router

from .ledger.stock_ledger_router import router as stock_ledger_router
from .ledger.dashboard_router import router as dashboard_router


__all__ = [
"part_router",
"supplier_router",
"company_router",

"warehouse_dispatch_router",
"company_dispatch_router",

"stock_ledger_router",
"dashboard_router",
]
