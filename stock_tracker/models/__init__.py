# Masters
from stock_tracker.models.masters.part_models import Part
from stock_tracker.models.masters.supplier_models import Supplier
from stock_tracker.models.masters.company_models import Company

# Transactions
from stock_tracker.models.transactions.warehouse_dispatch_models import WarehouseDispatch
from stock_tracker.models.transactions.company_dispatch_models import CompanyDispatch
