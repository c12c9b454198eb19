"""집계 통계 (대시보드 KPI용)"""
from dataclasses import dataclass, field
from typing import Dict

from shopee_profit.models.order import OrderStatus


@dataclass(frozen=True)
class SummaryStatistics:
    """유효 주문(완료/배송/결제) 기준 집계"""
    counts: Dict[OrderStatus, int] = field(default_factory=dict)
    total_sales_idr: float = 0.0
    total_fees_idr: float = 0.0
    total_income_idr: float = 0.0
    total_income_rmb: float = 0.0
    total_cost_rmb: float = 0.0
    total_ads_rmb: float = 0.0
    final_net_profit_rmb: float = 0.0
    margin: float = 0.0      # %
    has_costs: bool = False  # 원가표가 없으면 이익/이익률 표시 안 함

    @property
    def completed_count(self) -> int:
        """완료 + 배송 건수"""
        return self.counts.get(OrderStatus.COMPLETED, 0) + self.counts.get(OrderStatus.DELIVERED, 0)

    @property
    def cancelled_count(self) -> int:
        """취소 + 실패 건수"""
        return self.counts.get(OrderStatus.CANCELLED, 0) + self.counts.get(OrderStatus.FAILED, 0)

    @property
    def total_orders(self) -> int:
        return sum(self.counts.values())
