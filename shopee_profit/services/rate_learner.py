"""
SKU 수수료율 학습
================
주문표의 실제 수수료로 SKU별 수수료율을 추정해 설정에 반영한다.
9.48%처럼 표준 요율 근처 값은 표준 요율(9.5%, 8.25%)로 스냅.
"""
import logging
from dataclasses import dataclass
from typing import Iterable

from shopee_profit.constants import SNAP_RATES, SNAP_TOLERANCE
from shopee_profit.models.fee_config import FeeConfig
from shopee_profit.models.order import OrderRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LearningResult:
    """학습 결과 (config는 항상 새 값, 변경이 없으면 입력 그대로)"""
    updated_count: int
    config: FeeConfig


def snap_rate(rate: float) -> float:
    """가장 가까운 표준 요율과의 차이가 허용 오차 미만이면 표준 요율로"""
    nearest = min(SNAP_RATES, key=lambda r: abs(rate - r))
    if abs(rate - nearest) < SNAP_TOLERANCE:
        return nearest
    return rate


def learn_commission_rates(orders: Iterable[OrderRecord], config: FeeConfig) -> LearningResult:
    """
    주문별 실제 수수료 / 판매가 → SKU 학습 요율

    Args:
        orders: 주문 레코드
        config: 현재 설정 (변경하지 않음)

    Returns:
        LearningResult (갱신 건수 + 새 설정)
    """
    rates = dict(config.sku_commission_rates)
    updated = 0

    for o in orders:
        if not o.sku or o.raw_commission_fee <= 0 or o.product_price <= 0:
            continue
        rate = snap_rate(o.raw_commission_fee / o.product_price)
        if rates.get(o.sku) != rate:
            rates[o.sku] = rate
            updated += 1

    if updated == 0:
        logger.info("학습할 수수료 정보가 없습니다")
        return LearningResult(updated_count=0, config=config)

    logger.info(f"SKU 수수료율 {updated}건 갱신")
    return LearningResult(updated_count=updated, config=config.with_sku_rates(rates))
