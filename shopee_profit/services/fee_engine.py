"""
수수료 계산 엔진
===============
주문 1건 + 매칭 원가 + 설정 → CalculatedOrder (순수 함수)

수수료 결정 순서 (먼저 해당하는 규칙 적용):
    1. 주문표에 실제 수수료가 있으면 그대로 사용          → "Order"
    2. SKU 학습 요율이 있으면 판매가 × 학습 요율          → "SKU Map"
    3. 판매가 × 전역 수수료율                             → "Global Default"

순수입(IDR) = 실제 예상수입(Total Penghasilan) 또는 판매가 - 수수료 합계
순이익(RMB) = 순수입 / 환율 - 단가 × 배송 배수 × 수량
취소/실패 주문은 수수료·수입·이익을 모두 0으로 강제
"""
import logging
from dataclasses import fields
from typing import Iterable, List, Optional

from shopee_profit.models.calculated import CalculatedOrder, CommissionSource
from shopee_profit.models.cost import CostRecord
from shopee_profit.models.fee_config import FeeConfig
from shopee_profit.models.order import OrderRecord
from shopee_profit.services.cost_ingestor import build_cost_map

logger = logging.getLogger(__name__)


def _commission(order: OrderRecord, config: FeeConfig):
    """(수수료, 적용 요율, 출처, 실제값 여부)"""
    price = order.product_price

    if order.raw_commission_fee > 0:
        fee = order.raw_commission_fee
        rate = fee / price if price else 0.0
        return fee, rate, CommissionSource.ORDER, True

    learned = config.learned_rate(order.sku)
    if learned:
        return price * learned, learned, CommissionSource.SKU_MAP, False

    rate = config.commission_rate
    return price * rate, rate, CommissionSource.GLOBAL_DEFAULT, False


def calculate_order(
    order: OrderRecord,
    cost: Optional[CostRecord],
    config: FeeConfig,
) -> CalculatedOrder:
    """
    주문 1건 계산

    Args:
        order: 주문 레코드
        cost: SKU로 매칭된 원가 (없으면 None)
        config: 수수료 설정

    Returns:
        CalculatedOrder
    """
    price = order.product_price
    is_cancelled = order.is_cancelled

    # 단가 × 배송 배수 (미매칭이면 0)
    cost_rmb = cost.cost_rmb if cost else 0.0

    commission_fee, commission_rate, commission_source, is_commission_actual = _commission(order, config)

    if order.raw_service_fee > 0:
        service_fee = order.raw_service_fee
        is_service_actual = True
    else:
        service_fee = price * config.service_rate
        is_service_actual = False

    processing_fee = config.processing_fee_fixed
    xtra_fee = price * config.xtra_rate if config.xtra_enabled else 0.0
    fees_total = commission_fee + service_fee + processing_fee + xtra_fee

    is_income_actual = False
    if is_cancelled:
        net_income = 0.0
    elif order.estimated_income and order.estimated_income > 0:
        net_income = order.estimated_income
        is_income_actual = True
    else:
        net_income = price - fees_total

    if is_cancelled:
        net_profit = 0.0
    else:
        net_profit = net_income / config.exchange_rate - cost_rmb * order.quantity

    return CalculatedOrder(
        **{f.name: getattr(order, f.name) for f in fields(OrderRecord)},
        cost_rmb=cost_rmb,
        commission_fee=0.0 if is_cancelled else commission_fee,
        is_commission_actual=is_commission_actual,
        service_fee=0.0 if is_cancelled else service_fee,
        is_service_actual=is_service_actual,
        processing_fee=0.0 if is_cancelled else processing_fee,
        xtra_fee=0.0 if is_cancelled else xtra_fee,
        fees_total=0.0 if is_cancelled else fees_total,
        net_income_idr=net_income,
        is_income_actual=is_income_actual,
        net_profit_rmb=net_profit,
        is_matched_cost=cost is not None,
        commission_rate_used=0.0 if is_cancelled else commission_rate,
        commission_source=commission_source,
    )


def calculate_orders(
    orders: Iterable[OrderRecord],
    costs: Iterable[CostRecord],
    config: FeeConfig,
) -> List[CalculatedOrder]:
    """
    주문 전체 계산 (원가 맵은 한 번만 생성)

    Returns:
        CalculatedOrder 리스트 (주문 순서 유지)
    """
    cost_map = build_cost_map(costs)
    result = [calculate_order(o, cost_map.get(o.sku), config) for o in orders]

    matched = sum(1 for c in result if c.is_matched_cost)
    logger.debug(f"주문 계산 완료: {len(result)}건 (원가 매칭 {matched}건)")
    return result
