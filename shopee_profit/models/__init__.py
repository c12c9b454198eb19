"""데이터 모델"""
from .cell import Cell, Grid, to_cell, cell_text, is_blank
from .order import OrderStatus, OrderRecord, SUCCESSFUL_STATUSES, CANCELLED_STATUSES
from .cost import CostRecord
from .fee_config import FeeConfig
from .calculated import CalculatedOrder, CommissionSource
from .summary import SummaryStatistics

__all__ = [
    "Cell",
    "Grid",
    "to_cell",
    "cell_text",
    "is_blank",
    "OrderStatus",
    "OrderRecord",
    "SUCCESSFUL_STATUSES",
    "CANCELLED_STATUSES",
    "CostRecord",
    "FeeConfig",
    "CalculatedOrder",
    "CommissionSource",
    "SummaryStatistics",
]
