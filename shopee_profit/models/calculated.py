"""주문별 계산 결과 (저장하지 않음, 입력이 바뀌면 다시 계산)"""
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from shopee_profit.models.order import OrderRecord


class CommissionSource(str, Enum):
    """적용된 수수료율 출처"""
    ORDER = "Order"
    SKU_MAP = "SKU Map"
    GLOBAL_DEFAULT = "Global Default"


@dataclass(frozen=True)
class CalculatedOrder(OrderRecord):
    """
    주문 + 수수료 분해 + 순이익

    금액 단위: *_idr / 수수료 = IDR, *_rmb = RMB
    취소/실패 주문은 모든 수수료·수입·이익 필드가 0
    """
    cost_rmb: float = 0.0             # 단가 × 배송 배수 (미매칭이면 0)
    commission_fee: float = 0.0
    is_commission_actual: bool = False
    service_fee: float = 0.0
    is_service_actual: bool = False
    processing_fee: float = 0.0
    xtra_fee: float = 0.0
    fees_total: float = 0.0
    net_income_idr: float = 0.0
    is_income_actual: bool = False
    net_profit_rmb: float = 0.0
    is_matched_cost: bool = False
    commission_rate_used: float = 0.0
    commission_source: CommissionSource = CommissionSource.GLOBAL_DEFAULT

    @property
    def line_cost_rmb(self) -> float:
        """수량 반영 원가"""
        return self.cost_rmb * self.quantity

    @property
    def expand_key(self) -> Tuple[str, str]:
        """화면 펼침 상태 키"""
        return (self.order_id, self.sku)

    def __repr__(self):
        return (
            f"<CalculatedOrder(order_id='{self.order_id}', fees={self.fees_total}, "
            f"income={self.net_income_idr}, profit={self.net_profit_rmb:.2f})>"
        )
