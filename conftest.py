import sys
from pathlib import Path
import os

# Ensure repo root on sys.path for imports from anywhere in tests tree.
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("WORKBOARD_STORE_BACKEND", "memory")
os.environ.setdefault("WORKBOARD_STORE_KEY", "workboard.workOrders")

from workboard.work_orders import routes as work_orders_routes  # noqa: E402

work_orders_routes._service = None
