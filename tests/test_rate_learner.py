"""
rate_learner.py 테스트
======================
SKU 수수료율 학습/스냅 테스트
"""
import pytest
import sys
from pathlib import Path

# 프로젝트 루트 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

from shopee_profit.models.fee_config import FeeConfig
from shopee_profit.models.order import OrderRecord, OrderStatus
from shopee_profit.services.rate_learner import learn_commission_rates, snap_rate


def _order(sku, price, fee, order_id="1"):
    return OrderRecord(
        order_id=order_id, sku=sku, product_price=price,
        status=OrderStatus.COMPLETED, raw_commission_fee=fee,
    )


class TestSnapRate:
    """표준 요율 스냅"""

    def test_snap_to_standard(self):
        assert snap_rate(0.0948) == 0.095
        assert snap_rate(0.0830) == 0.0825

    def test_keep_raw_rate(self):
        assert snap_rate(0.07) == 0.07
        assert snap_rate(0.12) == 0.12


class TestLearnCommissionRates:
    """learn_commission_rates 테스트"""

    def setup_method(self):
        self.config = FeeConfig(
            exchange_rate=2425, commission_rate=0.095,
            service_rate=0.045, processing_fee_fixed=1250,
        )

    def test_learn_and_snap(self):
        orders = [
            _order("A", 100000.0, 9480.0, "1"),
            _order("B", 100000.0, 7000.0, "2"),
        ]
        result = learn_commission_rates(orders, self.config)
        assert result.updated_count == 2
        assert result.config.sku_commission_rates["A"] == 0.095
        assert result.config.sku_commission_rates["B"] == pytest.approx(0.07)
        # 입력 설정은 변경하지 않음
        assert dict(self.config.sku_commission_rates) == {}

    def test_unchanged_rate_not_counted(self):
        config = self.config.with_sku_rates({"A": 0.095})
        result = learn_commission_rates([_order("A", 100000.0, 9500.0)], config)
        assert result.updated_count == 0
        assert result.config is config

    def test_ignored_orders(self):
        """SKU 없음 / 수수료 0 / 판매가 0은 학습하지 않음"""
        orders = [
            _order("", 100000.0, 9500.0),
            _order("A", 100000.0, 0.0),
            _order("B", 0.0, 9500.0),
        ]
        result = learn_commission_rates(orders, self.config)
        assert result.updated_count == 0
        assert dict(result.config.sku_commission_rates) == {}

    def test_keeps_other_skus(self):
        config = self.config.with_sku_rates({"Z": 0.0825})
        result = learn_commission_rates([_order("A", 100000.0, 9500.0)], config)
        assert dict(result.config.sku_commission_rates) == {"Z": 0.0825, "A": 0.095}
