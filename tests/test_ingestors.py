"""
시트 가져오기 테스트
====================
주문표 / 원가표 / 광고 보고서 파싱 테스트
"""
import pytest
import sys
from pathlib import Path

# 프로젝트 루트 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

from shopee_profit.exceptions import CostHeaderNotFoundError
from shopee_profit.models.order import OrderStatus
from shopee_profit.services.ads_ingestor import parse_ads
from shopee_profit.services.cost_ingestor import build_cost_map, normalize_sku, parse_costs
from shopee_profit.services.order_ingestor import parse_orders
from shopee_profit.utils.import_logger import ImportLogger
from shopee_profit.models.cost import CostRecord


ORDER_HEADER = [
    "No. Pesanan", "Status Pesanan", "Nomor Referensi SKU", "Total Harga Produk",
    "Jumlah", "Biaya Komisi", "Biaya Layanan", "Total Penghasilan",
]


class TestParseOrders:
    """주문표 파싱"""

    def setup_method(self):
        self.import_log = ImportLogger("orders")

    def test_indonesian_export(self):
        """인도네시아어 헤더 주문표"""
        grid = [
            ORDER_HEADER,
            ["2401010001", "Selesai", "A-01", "Rp 100.000", 2.0, "-Rp 9.500", "-4.500", "Rp 84.750"],
            ["2401010002", "Batal", "B-02", 50000.0, None, None, None, None],
        ]
        orders = parse_orders(grid, import_log=self.import_log)

        assert len(orders) == 2
        first = orders[0]
        assert first.order_id == "2401010001"
        assert first.sku == "A-01"
        assert first.status == OrderStatus.COMPLETED
        assert first.raw_status == "Selesai"
        assert first.product_price == 100000.0
        assert first.quantity == 2
        # 공제 부호는 버림
        assert first.raw_commission_fee == 9500.0
        assert first.raw_service_fee == 4500.0
        assert first.estimated_income == 84750.0

        second = orders[1]
        assert second.status == OrderStatus.CANCELLED
        assert second.quantity == 1
        assert second.raw_commission_fee == 0.0
        assert second.estimated_income is None

    def test_english_aliases(self):
        """영어 내보내기 별칭"""
        grid = [
            ["Order ID", "Order Status", "SKU Reference No.", "Product Price", "Quantity"],
            [12345.0, "Completed", "C-3", 75000.0, 1.0],
        ]
        orders = parse_orders(grid)
        assert len(orders) == 1
        # 숫자 주문번호는 소수점 없이
        assert orders[0].order_id == "12345"
        assert orders[0].product_price == 75000.0

    def test_alias_priority(self):
        """앞 별칭이 비어 있으면 다음 별칭 사용"""
        grid = [
            ["No. Pesanan", "Nomor Referensi SKU", "Parent SKU"],
            ["1", None, "PARENT-1"],
            ["2", "REF-2", "PARENT-2"],
        ]
        orders = parse_orders(grid)
        assert [o.sku for o in orders] == ["PARENT-1", "REF-2"]

    def test_zero_under_first_alias_falls_through(self):
        """첫 별칭 값이 숫자 0이면 다음 별칭 사용"""
        grid = [
            ["No. Pesanan", "Biaya Komisi", "Commission Fee", "Biaya Layanan"],
            ["1", 0.0, 9500.0, "0"],
        ]
        order = parse_orders(grid)[0]
        assert order.raw_commission_fee == 9500.0
        assert order.raw_service_fee == 0.0

    def test_header_is_first_non_blank_row(self):
        grid = [
            [],
            [None, None],
            ["No. Pesanan", "Total Harga Produk"],
            ["1", "Rp 10.000"],
        ]
        orders = parse_orders(grid)
        assert len(orders) == 1
        assert orders[0].product_price == 10000.0

    def test_rows_without_order_id_are_skipped(self):
        grid = [
            ["No. Pesanan", "Total Harga Produk"],
            [None, "Rp 10.000"],
            [],
            ["3", "Rp 30.000"],
        ]
        orders = parse_orders(grid, import_log=self.import_log)
        assert [o.order_id for o in orders] == ["3"]
        result = self.import_log.end_import()
        assert result.kept_count == 1
        assert result.skipped_count == 1
        assert result.skipped[0]["row_index"] == 1
        assert result.header_row == 0

    def test_empty_grid(self):
        assert parse_orders([]) == []
        assert parse_orders([[None], []]) == []


class TestParseCosts:
    """원가표 파싱"""

    def test_basic(self):
        grid = [
            ["원가표"],
            ["SKU", "COST_RMB", "UNIT"],
            ["A-01", "10", "2"],
            ["SKU: B-02 ", 5.5, None],
            [None, 3.0, 1.0],
            ["C-03", "abc", 0.5],
        ]
        costs = parse_costs(grid)
        assert costs == [
            CostRecord(sku="A-01", unit_cost_rmb=10.0, ship_multiplier=2.0),
            CostRecord(sku="B-02", unit_cost_rmb=5.5, ship_multiplier=1.0),
            # 원가 해석 실패 → 0, 배수 1 미만 → 1
            CostRecord(sku="C-03", unit_cost_rmb=0.0, ship_multiplier=1.0),
        ]

    def test_without_multiplier_column(self):
        grid = [["Item Code", "Price"], ["X", 7.0]]
        costs = parse_costs(grid)
        assert costs == [CostRecord(sku="X", unit_cost_rmb=7.0, ship_multiplier=1.0)]

    def test_header_not_found(self):
        """헤더가 없으면 샘플 행을 담아 예외"""
        grid = [["foo", "bar"], ["1", "2"]]
        with pytest.raises(CostHeaderNotFoundError) as exc_info:
            parse_costs(grid)
        assert exc_info.value.sample_rows == ["foo, bar", "1, 2"]
        assert "foo, bar" in str(exc_info.value)

    def test_normalize_sku(self):
        assert normalize_sku("sku:A-1") == "A-1"
        assert normalize_sku(" SKU: A-1 ") == "A-1"
        assert normalize_sku(101.0) == "101"

    def test_build_cost_map_last_wins(self):
        costs = [
            CostRecord(sku="A", unit_cost_rmb=1.0),
            CostRecord(sku="A", unit_cost_rmb=2.0),
        ]
        assert build_cost_map(costs)["A"].unit_cost_rmb == 2.0


class TestParseAds:
    """광고비 합계"""

    def test_sum_below_header(self):
        grid = [
            ["Laporan Iklan"],
            ["Nama Iklan", "Expense"],
            ["A", "Rp 50.000"],
            ["B", 25000.0],
            ["C", None],
            ["Total", "-"],
        ]
        assert parse_ads(grid) == 75000.0

    def test_short_rows(self):
        """광고비 컬럼까지 닿지 않는 행은 0"""
        grid = [["Nama", "Ad Spend"], ["A"], ["B", "1.000"]]
        assert parse_ads(grid) == 1000.0

    def test_not_found_is_zero(self):
        """광고비 컬럼이 없으면 오류 없이 0"""
        grid = [["Campaign", "Clicks"], ["A", 10.0]]
        assert parse_ads(grid) == 0.0
