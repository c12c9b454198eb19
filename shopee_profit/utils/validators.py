"""
입력 검증 모듈
==============
수수료 설정 값 검증

사용법:
    validator = FeeConfigValidator()
    errors = validator.validate(config)
    if errors:
        print(f"검증 실패: {errors}")
"""
import math
import logging
from typing import Any, List, Optional
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class ValidationError:
    """검증 오류"""
    field: str
    message: str
    value: Any = None


class FeeConfigValidator:
    """
    수수료 설정 검증기

    환율은 0보다 커야 하고, 요율/고정비는 음수가 될 수 없다.
    """

    RATE_FIELDS = ["commission_rate", "service_rate", "xtra_rate"]

    def validate_exchange_rate(self, rate: Any) -> Optional[ValidationError]:
        """
        환율 검증

        Args:
            rate: 1 RMB당 IDR

        Returns:
            ValidationError 또는 None (유효한 경우)
        """
        number = self._to_number(rate)
        if number is None:
            return ValidationError("exchange_rate", f"환율이 숫자가 아닙니다: {rate}", rate)
        if number <= 0:
            return ValidationError("exchange_rate", "환율은 0보다 커야 합니다", rate)
        return None

    def validate_non_negative(self, value: Any, field_name: str) -> Optional[ValidationError]:
        """요율/고정비 검증 (유한한 0 이상 숫자)"""
        number = self._to_number(value)
        if number is None:
            return ValidationError(field_name, f"숫자가 아닙니다: {value}", value)
        if number < 0:
            return ValidationError(field_name, "음수는 허용되지 않습니다", value)
        return None

    def validate(self, config) -> List[ValidationError]:
        """
        설정 전체 검증

        Args:
            config: FeeConfig (또는 같은 속성을 가진 객체)

        Returns:
            ValidationError 리스트 (빈 리스트면 유효)
        """
        errors = []

        err = self.validate_exchange_rate(config.exchange_rate)
        if err:
            errors.append(err)

        for field_name in self.RATE_FIELDS + ["processing_fee_fixed"]:
            err = self.validate_non_negative(getattr(config, field_name), field_name)
            if err:
                errors.append(err)

        for sku, rate in config.sku_commission_rates.items():
            err = self.validate_non_negative(rate, f"sku_commission_rates[{sku}]")
            if err:
                errors.append(err)

        if errors:
            for e in errors:
                logger.warning(f"설정 검증 실패: {e.field} - {e.message}")

        return errors

    @staticmethod
    def _to_number(value: Any) -> Optional[float]:
        """유한한 숫자로 변환 (bool/문자열/NaN은 거부)"""
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        if not math.isfinite(value):
            return None
        return float(value)
