"""주문 모델 (Shopee 주문표 1행 = 1레코드)"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class OrderStatus(str, Enum):
    """정규화된 주문 상태"""
    COMPLETED = "Completed"
    PAID = "Paid"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"
    FAILED = "Failed"
    IN_PROGRESS = "InProgress"
    UNKNOWN = "Unknown"


# 매출 집계 대상 상태
SUCCESSFUL_STATUSES = (OrderStatus.COMPLETED, OrderStatus.DELIVERED, OrderStatus.PAID)
# 수수료/수익을 0으로 강제하는 상태
CANCELLED_STATUSES = (OrderStatus.CANCELLED, OrderStatus.FAILED)


@dataclass(frozen=True)
class OrderRecord:
    """주문표에서 읽은 주문 1건 (금액 단위: IDR)"""
    order_id: str
    sku: str
    product_price: float
    quantity: int = 1
    status: OrderStatus = OrderStatus.UNKNOWN
    raw_status: str = ""
    shipping_subsidy: float = 0.0   # Subsidi Pengiriman
    logistic_fee: float = 0.0       # 구매자 부담 배송비
    raw_commission_fee: float = 0.0  # 주문표의 실제 수수료 (없으면 0)
    raw_service_fee: float = 0.0     # 주문표의 실제 서비스비 (없으면 0)
    estimated_income: Optional[float] = None  # Total Penghasilan

    @property
    def is_cancelled(self) -> bool:
        return self.status in CANCELLED_STATUSES

    def __repr__(self):
        return f"<OrderRecord(order_id='{self.order_id}', sku='{self.sku}', price={self.product_price})>"
