"""
number_parser.py 테스트
=======================
parse_idr, extract_number, parse_quantity 테스트
"""
import math
import pytest
import sys
from pathlib import Path

# 프로젝트 루트 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

from shopee_profit.utils.number_parser import parse_idr, extract_number, parse_quantity


class TestParseIdr:
    """parse_idr 테스트"""

    # ─── 숫자 입력 ───

    @pytest.mark.parametrize("value", [0, 1, 28850, 1250.5, -9500.0])
    def test_finite_number_passthrough(self, value):
        """유한한 숫자는 그대로"""
        assert parse_idr(value) == value

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_number(self, value):
        """NaN/무한대 → 0"""
        assert parse_idr(value) == 0

    def test_none_and_blank(self):
        """None/빈 문자열 → 0"""
        assert parse_idr(None) == 0
        assert parse_idr("") == 0
        assert parse_idr("   ") == 0

    def test_bool_is_not_a_number(self):
        """bool은 금액으로 보지 않음"""
        assert parse_idr(True) == 0

    # ─── 문자열 입력 ───

    def test_rupiah_thousands(self):
        """'Rp 28.850' → 28850"""
        assert parse_idr("Rp 28.850") == 28850.0

    def test_rupiah_millions(self):
        """천단위 구분자 여러 개"""
        assert parse_idr("Rp1.250.000") == 1250000.0
        assert parse_idr("rp 1.250.000") == 1250000.0

    def test_comma_is_decimal(self):
        """'.' 없이 ',' 하나면 소수점으로 해석"""
        assert parse_idr("28,850") == pytest.approx(28.85)

    def test_decimal_with_thousands(self):
        """'12.345,50' → 12345.5"""
        assert parse_idr("12.345,50") == pytest.approx(12345.5)

    def test_negative_text(self):
        """음수 표기 유지"""
        assert parse_idr("-Rp 9.500") == -9500.0

    def test_leading_numeric_prefix(self):
        """앞쪽 숫자 부분만 읽음"""
        assert parse_idr("1500 IDR") == 1500.0

    def test_garbage(self):
        """숫자가 없으면 0"""
        assert parse_idr("abc") == 0
        assert parse_idr("Rp") == 0
        assert parse_idr("-") == 0


class TestExtractNumber:
    """extract_number (원가표용) 테스트"""

    def test_plain_text(self):
        assert extract_number("12.5") == 12.5

    def test_strips_symbols(self):
        """통화 기호/단위 제거"""
        assert extract_number("¥12.5") == 12.5
        assert extract_number("x2") == 2.0

    def test_number_input(self):
        assert extract_number(10) == 10.0
        assert extract_number(3.75) == 3.75

    def test_default_on_empty(self):
        """값이 없거나 0이면 기본값"""
        assert extract_number(None, 1.0) == 1.0
        assert extract_number("", 1.0) == 1.0
        assert extract_number("abc", 1.0) == 1.0
        assert extract_number(0, 1.0) == 1.0

    def test_sign_is_dropped(self):
        """부호는 숫자 외 문자로 취급"""
        assert extract_number("-5") == 5.0
        assert extract_number(-5.0) == 5.0


class TestParseQuantity:
    """parse_quantity 테스트"""

    def test_valid(self):
        assert parse_quantity(3.0) == 3
        assert parse_quantity("2") == 2

    def test_defaults_to_one(self):
        """빈칸/0/음수/문자 → 1"""
        assert parse_quantity(None) == 1
        assert parse_quantity(0.0) == 1
        assert parse_quantity("-2") == 1
        assert parse_quantity("abc") == 1
        assert parse_quantity(math.nan) == 1
