"""
수익 계산 세션
=============
현재 불러온 주문/원가/광고비/설정을 보관하고,
계산 결과는 호출할 때마다 새로 만든다 (캐시 없음).

규칙:
- 새 주문표를 가져오면 원가표와 광고비는 초기화
- 가져오기 실패 시 기존 데이터는 그대로 유지

사용법:
    session = ProfitSession(FeeConfig.from_settings(settings))
    session.import_orders("orders.xlsx")
    session.import_costs("costs.xlsx")
    summary = session.summary()
"""
import logging
from typing import List, Optional

from shopee_profit.constants import HEADER_SCAN_ROWS
from shopee_profit.models.calculated import CalculatedOrder
from shopee_profit.models.cost import CostRecord
from shopee_profit.models.fee_config import FeeConfig
from shopee_profit.models.order import OrderRecord
from shopee_profit.models.summary import SummaryStatistics
from shopee_profit.services.ads_ingestor import parse_ads
from shopee_profit.services.cost_ingestor import parse_costs
from shopee_profit.services.fee_engine import calculate_orders
from shopee_profit.services.order_ingestor import parse_orders
from shopee_profit.services.rate_learner import learn_commission_rates
from shopee_profit.services.report import summarize
from shopee_profit.services.workbook_loader import Source, load_grid
from shopee_profit.utils.import_logger import ImportLogger, ImportResult

logger = logging.getLogger(__name__)


class ProfitSession:
    """
    주문/원가/광고비 + 설정 보관

    Attributes:
        config: 현재 수수료 설정 (불변 값, 교체만 가능)
        orders: 주문 레코드
        costs: 원가 레코드
        ads_spend_idr: 광고비 합계
    """

    def __init__(self, config: FeeConfig, save_reports: bool = False,
                 header_scan_rows: int = HEADER_SCAN_ROWS):
        """
        Args:
            config: 초기 수수료 설정
            save_reports: 가져오기 결과를 logs/에 JSON으로 저장할지 여부
            header_scan_rows: 원가표/광고 보고서 헤더 탐지 스캔 행 수
        """
        self.config = config
        self.save_reports = save_reports
        self.header_scan_rows = header_scan_rows
        self.orders: List[OrderRecord] = []
        self.costs: List[CostRecord] = []
        self.ads_spend_idr: float = 0.0
        self.last_import: Optional[ImportResult] = None

    # ─── 가져오기 ───

    def import_orders(self, source: Source, filename: Optional[str] = None) -> int:
        """주문표 가져오기 (원가/광고비 초기화). 가져온 주문 수 반환"""
        grid = load_grid(source, filename)
        import_log = self._import_logger("orders", source, filename)
        orders = parse_orders(grid, import_log=import_log)
        self.last_import = import_log.end_import(save_report=self.save_reports)

        if self.costs or self.ads_spend_idr:
            logger.info("새 주문표 → 원가표/광고비 초기화")
        self.orders = orders
        self.costs = []
        self.ads_spend_idr = 0.0
        return len(orders)

    def import_costs(self, source: Source, filename: Optional[str] = None) -> int:
        """원가표 가져오기. 가져온 SKU 행 수 반환"""
        grid = load_grid(source, filename)
        import_log = self._import_logger("costs", source, filename)
        costs = parse_costs(grid, import_log=import_log, max_rows=self.header_scan_rows)
        self.last_import = import_log.end_import(save_report=self.save_reports)

        self.costs = costs
        return len(costs)

    def import_ads(self, source: Source, filename: Optional[str] = None) -> float:
        """광고 보고서 가져오기. 광고비 합계 반환"""
        grid = load_grid(source, filename)
        import_log = self._import_logger("ads", source, filename)
        spend = parse_ads(grid, import_log=import_log, max_rows=self.header_scan_rows)
        self.last_import = import_log.end_import(save_report=self.save_reports)

        self.ads_spend_idr = spend
        return spend

    def _import_logger(self, sheet_type: str, source: Source, filename: Optional[str]) -> ImportLogger:
        name = filename or getattr(source, "name", None) or (source if isinstance(source, str) else "")
        return ImportLogger(sheet_type, source=str(name))

    # ─── 설정 ───

    def set_config(self, config: FeeConfig):
        """설정 교체"""
        logger.debug(f"설정 변경: {config}")
        self.config = config

    def learn_rates(self) -> int:
        """현재 주문으로 SKU 수수료율 학습. 갱신된 건수 반환"""
        result = learn_commission_rates(self.orders, self.config)
        if result.updated_count > 0:
            self.config = result.config
        return result.updated_count

    # ─── 계산 ───

    @property
    def has_costs(self) -> bool:
        return len(self.costs) > 0

    def calculated_orders(self) -> List[CalculatedOrder]:
        """주문별 계산 결과"""
        return calculate_orders(self.orders, self.costs, self.config)

    def summary(self) -> SummaryStatistics:
        """집계 통계"""
        return summarize(self.calculated_orders(), self.ads_spend_idr, self.config, self.has_costs)
