"""원가표 가져오기 (SKU → 단가 RMB)"""
import logging
import re
from typing import Dict, Iterable, List, Optional

from shopee_profit.constants import HEADER_SCAN_ROWS
from shopee_profit.exceptions import CostHeaderNotFoundError
from shopee_profit.models.cell import Grid, cell_text, is_blank
from shopee_profit.models.cost import CostRecord
from shopee_profit.services.schema_detector import HeaderNotFound, NOT_FOUND, detect_cost_columns
from shopee_profit.utils.import_logger import ImportLogger
from shopee_profit.utils.number_parser import extract_number

logger = logging.getLogger(__name__)

_SKU_PREFIX_RE = re.compile(r"^sku:", re.IGNORECASE)


def normalize_sku(value) -> str:
    """'SKU: A-01 ' → 'A-01'"""
    sku = cell_text(value).strip()
    return _SKU_PREFIX_RE.sub("", sku).strip()


def parse_costs(
    grid: Grid,
    import_log: Optional[ImportLogger] = None,
    max_rows: int = HEADER_SCAN_ROWS,
) -> List[CostRecord]:
    """
    원가표 파싱

    Args:
        grid: 워크북 첫 시트 셀 목록 (헤더 위치 미정)
        import_log: 행 단위 결과 기록용
        max_rows: 헤더 탐지 스캔 행 수

    Returns:
        CostRecord 리스트

    Raises:
        CostHeaderNotFoundError: 스캔 범위에서 SKU + 원가 헤더를 찾지 못한 경우
    """
    import_log = import_log or ImportLogger("costs")

    detection = detect_cost_columns(grid, max_rows=max_rows)
    if isinstance(detection, HeaderNotFound):
        logger.error(f"원가표 헤더 탐지 실패 (앞쪽 {max_rows}행)")
        raise CostHeaderNotFoundError(detection.sample_rows)

    header_row = detection.header_row
    sku_col = detection.column("sku")
    cost_col = detection.column("cost")
    mult_col = detection.column("multiplier")
    import_log.log_header(header_row)
    logger.info(
        f"원가표 헤더: {header_row}행 (sku={sku_col}, cost={cost_col}, multiplier={mult_col})"
    )

    result = []
    for row_idx in range(header_row + 1, len(grid)):
        row = grid[row_idx]
        sku_cell = row[sku_col] if sku_col < len(row) else None
        if is_blank(sku_cell):
            continue

        sku = normalize_sku(sku_cell)
        if not sku:
            import_log.log_skipped(row_idx, "SKU 없음", preview=cell_text(sku_cell))
            continue

        cost = extract_number(row[cost_col] if cost_col < len(row) else None, 0.0)
        mult = 1.0
        if mult_col != NOT_FOUND:
            mult = extract_number(row[mult_col] if mult_col < len(row) else None, 1.0)
            # 배송 배수는 1 이상
            if mult < 1:
                mult = 1.0

        result.append(CostRecord(sku=sku, unit_cost_rmb=cost, ship_multiplier=mult))
        import_log.log_kept()

    logger.info(f"원가표 파싱 완료: SKU {len(result)}건")
    return result


def build_cost_map(costs: Iterable[CostRecord]) -> Dict[str, CostRecord]:
    """SKU → CostRecord (중복 SKU는 마지막 행 우선)"""
    cost_map: Dict[str, CostRecord] = {}
    for c in costs:
        cost_map[c.sku] = c
    return cost_map
