"""Shopee ID 수익 계산기 - 주문/광고/원가 엑셀 → 주문별 수수료 분해 + 순이익"""

__version__ = "0.1.0"
