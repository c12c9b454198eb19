"""광고 보고서 가져오기 (광고비 합계, IDR)"""
import logging
from typing import Optional

from shopee_profit.constants import HEADER_SCAN_ROWS
from shopee_profit.models.cell import Grid
from shopee_profit.services.schema_detector import HeaderNotFound, detect_ads_columns
from shopee_profit.utils.import_logger import ImportLogger
from shopee_profit.utils.number_parser import parse_idr

logger = logging.getLogger(__name__)


def parse_ads(
    grid: Grid,
    import_log: Optional[ImportLogger] = None,
    max_rows: int = HEADER_SCAN_ROWS,
) -> float:
    """
    광고비 합계

    광고비 컬럼을 못 찾으면 오류가 아니라 "보고할 광고비 없음"으로 보고 0을 반환한다.
    헤더 아래 행은 숫자로 읽히는 셀만 더해진다 (텍스트 셀은 0).
    """
    import_log = import_log or ImportLogger("ads")

    detection = detect_ads_columns(grid, max_rows=max_rows)
    if isinstance(detection, HeaderNotFound):
        logger.warning(f"광고비 컬럼을 찾지 못했습니다 (앞쪽 {max_rows}행) → 광고비 0")
        return 0.0

    spend_col = detection.column("spend")
    import_log.log_header(detection.header_row)

    total_spend = 0.0
    for row in grid[detection.header_row + 1:]:
        cell = row[spend_col] if spend_col < len(row) else None
        total_spend += parse_idr(cell)
        import_log.log_kept()

    logger.info(f"광고비 합계: Rp {total_spend:,.0f}")
    return total_spend
