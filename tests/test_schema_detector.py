"""
schema_detector.py 테스트
=========================
광고 보고서/원가표 헤더 자동 탐지 테스트
"""
import sys
from pathlib import Path

# 프로젝트 루트 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

from shopee_profit.services.schema_detector import (
    ColumnRole,
    HeaderFound,
    HeaderNotFound,
    SPEND_ROLE,
    detect_ads_columns,
    detect_columns,
    detect_cost_columns,
    normalize_header,
    sample_rows,
)


class TestNormalizeHeader:
    """헤더 정규화"""

    def test_strip_separators(self):
        assert normalize_header("COST_RMB") == "costrmb"
        assert normalize_header("Item - Code") == "itemcode"
        assert normalize_header(" Total Spend ") == "totalspend"


class TestColumnRole:
    """ColumnRole 매칭"""

    def test_synonym_contains(self):
        role = ColumnRole("cost", synonyms=("cost",))
        assert role.matches("COST_RMB")
        assert not role.matches("SKU")
        assert not role.matches(None)

    def test_exact_only(self):
        """exact 토큰은 전체 일치만"""
        assert SPEND_ROLE.matches("Expense")
        assert SPEND_ROLE.matches("Cost")
        assert not SPEND_ROLE.matches("Cost per Conversion")

    def test_find_in(self):
        role = ColumnRole("sku", synonyms=("sku",))
        assert role.find_in(["No", "Nama", "SKU"]) == 2
        assert role.find_in(["No", "Nama"]) == -1


class TestDetectCostColumns:
    """원가표 헤더 탐지"""

    def test_header_on_first_row(self):
        grid = [
            ["SKU", "COST_RMB", "UNIT"],
            ["A-01", 10.0, 2.0],
        ]
        result = detect_cost_columns(grid)
        assert isinstance(result, HeaderFound)
        assert result.header_row == 0
        assert result.column("sku") == 0
        assert result.column("cost") == 1
        assert result.column("multiplier") == 2

    def test_header_below_title_rows(self):
        """제목/빈 행 아래 헤더"""
        grid = [
            ["2024년 원가표"],
            [],
            [None, "商品代码", "成本"],
            [None, "A-01", "10"],
        ]
        result = detect_cost_columns(grid)
        assert isinstance(result, HeaderFound)
        assert result.header_row == 2
        assert result.column("sku") == 1
        assert result.column("cost") == 2
        assert result.column("multiplier") == -1

    def test_requires_all_roles_on_same_row(self):
        grid = [
            ["SKU", "Nama"],
            ["Harga", "cost"],
        ]
        result = detect_cost_columns(grid)
        assert isinstance(result, HeaderNotFound)
        assert result.sample_rows == ["SKU, Nama", "Harga, cost"]

    def test_scan_limit(self):
        """max_rows 밖의 헤더는 찾지 않음"""
        grid = [["x"]] * 5 + [["SKU", "COST"]]
        assert isinstance(detect_cost_columns(grid, max_rows=5), HeaderNotFound)
        assert isinstance(detect_cost_columns(grid, max_rows=6), HeaderFound)


class TestDetectAdsColumns:
    """광고 보고서 헤더 탐지"""

    def test_expense_column(self):
        grid = [
            ["Laporan Iklan Shopee"],
            ["Periode", "2024-01-01 - 2024-01-31"],
            ["Nama Iklan", "Dilihat", "Expense", "GMV"],
            ["Iklan A", 100.0, "Rp 50.000", "Rp 300.000"],
        ]
        result = detect_ads_columns(grid)
        assert isinstance(result, HeaderFound)
        assert result.header_row == 2
        assert result.column("spend") == 2

    def test_contains_token(self):
        grid = [["Campaign", "Biaya Iklan"]]
        result = detect_ads_columns(grid)
        assert isinstance(result, HeaderFound)
        assert result.column("spend") == 1

    def test_not_found(self):
        grid = [["Campaign", "Clicks"], ["A", 3.0]]
        assert isinstance(detect_ads_columns(grid), HeaderNotFound)


class TestSampleRows:
    """오류 메시지용 샘플"""

    def test_skips_blank_and_limits(self):
        grid = [[None, None], ["a", 1.0], [], ["b", 2.5], ["c"], ["d"], ["e"], ["f"]]
        assert sample_rows(grid, limit=4) == ["a, 1", "b, 2.5"]

    def test_detect_columns_generic(self):
        role = ColumnRole("name", synonyms=("nama",))
        result = detect_columns([["Nama Produk"]], required=[role])
        assert result == HeaderFound(header_row=0, columns={"name": 0})
