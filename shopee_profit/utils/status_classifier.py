"""주문 상태 분류 (인도네시아어/영어 혼용 상태 문자열 → OrderStatus)"""
from typing import Any

from shopee_profit.constants import STATUS_KEYWORDS
from shopee_profit.models.order import OrderStatus

# (상태, 키워드) - 우선순위 순서
_STATUS_RULES = [(OrderStatus(name), keywords) for name, keywords in STATUS_KEYWORDS]


def classify_status(raw_status: Any) -> OrderStatus:
    """
    상태 문자열 분류

    키워드가 서로 겹치므로("perlu dikirim" ⊃ "dikirim") 규칙 순서대로
    처음 매칭된 상태를 반환한다.
    """
    if raw_status is None:
        return OrderStatus.UNKNOWN
    s = str(raw_status).lower()
    for status, keywords in _STATUS_RULES:
        if any(k in s for k in keywords):
            return status
    return OrderStatus.UNKNOWN
