"""SKU 원가 모델 (원가표 업로드 기반)"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CostRecord:
    """SKU별 단가 (RMB)"""
    sku: str
    unit_cost_rmb: float
    ship_multiplier: float = 1.0  # 1+1 묶음 등 배송 배수
    note: Optional[str] = None

    @property
    def cost_rmb(self) -> float:
        """배송 배수 반영 단위 원가"""
        return self.unit_cost_rmb * (self.ship_multiplier or 1.0)

    def __repr__(self):
        return f"<CostRecord(sku='{self.sku}', cost={self.unit_cost_rmb}, x{self.ship_multiplier})>"
