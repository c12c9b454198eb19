"""
수수료 설정 값 객체
===================
모든 계산 함수에 명시적으로 전달되는 불변 설정.
변경이 필요하면 replace() / with_sku_rates()로 새 값을 만든다.
"""
from dataclasses import dataclass, field, replace as _dc_replace
from types import MappingProxyType
from typing import Mapping

from shopee_profit.exceptions import ConfigError
from shopee_profit.utils.validators import FeeConfigValidator


@dataclass(frozen=True)
class FeeConfig:
    """Shopee ID 수수료 설정"""
    exchange_rate: float          # 1 RMB = ? IDR
    commission_rate: float        # 전역 기본 수수료율
    service_rate: float           # 전역 서비스비율
    processing_fee_fixed: float   # 주문당 고정 처리비 (IDR)
    xtra_enabled: bool = False
    xtra_rate: float = 0.05
    sku_commission_rates: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self):
        # 학습 요율 맵은 읽기 전용 사본으로 고정
        object.__setattr__(
            self, "sku_commission_rates",
            MappingProxyType(dict(self.sku_commission_rates)),
        )
        errors = FeeConfigValidator().validate(self)
        if errors:
            raise ConfigError(errors)

    @classmethod
    def from_settings(cls, settings) -> "FeeConfig":
        """Settings(환경변수) 기본값으로 생성"""
        return cls(
            exchange_rate=settings.exchange_rate,
            commission_rate=settings.commission_rate,
            service_rate=settings.service_rate,
            processing_fee_fixed=settings.processing_fee_fixed,
            xtra_enabled=settings.xtra_enabled,
            xtra_rate=settings.xtra_rate,
        )

    def replace(self, **changes) -> "FeeConfig":
        """일부 필드만 바꾼 새 설정"""
        return _dc_replace(self, **changes)

    def with_sku_rates(self, rates: Mapping[str, float]) -> "FeeConfig":
        """학습 요율 맵을 교체한 새 설정"""
        return _dc_replace(self, sku_commission_rates=dict(rates))

    def learned_rate(self, sku: str) -> float:
        """SKU 학습 요율 (없으면 0)"""
        return self.sku_commission_rates.get(sku, 0.0) or 0.0
