"""
숫자/통화 파싱 모듈
==================
인도네시아 형식 금액 문자열("Rp 28.850", "28,850")을 float으로 변환.
셀 하나가 잘못돼도 가져오기 전체가 막히지 않도록 예외 없이 0으로 떨어진다.
"""
import math
import re
from typing import Any

from shopee_profit.constants import CURRENCY_SYMBOL

_CURRENCY_RE = re.compile(re.escape(CURRENCY_SYMBOL), re.IGNORECASE)
_WHITESPACE_RE = re.compile(r"\s+")
# parseFloat처럼 앞쪽의 유효한 숫자 부분만 읽음
_LEADING_FLOAT_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_LEADING_INT_RE = re.compile(r"^[+-]?\d+")
_NON_NUMERIC_RE = re.compile(r"[^0-9.]")


def _leading_float(text: str) -> float:
    """문자열 앞쪽 숫자 부분 → float (없으면 NaN)"""
    m = _LEADING_FLOAT_RE.match(text)
    if not m:
        return math.nan
    return float(m.group(0))


def parse_idr(value: Any) -> float:
    """
    금액 셀 → float

    "." 은 천단위 구분자로 보고 모두 제거, 첫 번째 "," 는 소수점으로 바꾼다.
    "28,850" 처럼 "." 없이 "," 하나만 있으면 28.85가 된다.

    Args:
        value: 숫자 또는 문자열 셀

    Returns:
        유한한 float (파싱 실패 시 0)
    """
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) else 0.0
    if value is None:
        return 0.0

    s = str(value).strip()
    if not s:
        return 0.0

    s = _CURRENCY_RE.sub("", s)
    s = _WHITESPACE_RE.sub("", s)
    s = s.replace(".", "")
    s = s.replace(",", ".", 1)

    num = _leading_float(s)
    return num if math.isfinite(num) else 0.0


def extract_number(value: Any, default: float = 0.0) -> float:
    """
    숫자와 "." 외 문자를 모두 지우고 앞쪽 숫자를 읽는다 (원가표용)

    결과가 없거나 0이면 default 반환.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        # 부호는 숫자 외 문자로 취급되어 사라짐
        num = abs(float(value))
    else:
        num = _leading_float(_NON_NUMERIC_RE.sub("", str(value)))
    if not math.isfinite(num) or num == 0:
        return default
    return num


def parse_quantity(value: Any) -> int:
    """수량 셀 → 1 이상 정수 (파싱 실패/0 이하면 1)"""
    if value is None:
        return 1
    if isinstance(value, float):
        if not math.isfinite(value):
            return 1
        qty = int(value)
    else:
        m = _LEADING_INT_RE.match(str(value).strip())
        if not m:
            return 1
        qty = int(m.group(0))
    return qty if qty >= 1 else 1
