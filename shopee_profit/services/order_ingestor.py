"""
주문표 가져오기
==============
Shopee ID 주문 내보내기 시트 → OrderRecord 리스트

- 첫 번째 비어 있지 않은 행이 헤더
- 컬럼은 위치가 아닌 별칭으로 찾음 (인도네시아어/영어 내보내기 모두 지원)
- 주문번호가 없는 행은 버림, 행 단위 오류는 발생시키지 않음
"""
import logging
from typing import Dict, List, Optional, Sequence

from shopee_profit.constants import ORDER_COLUMN_ALIASES
from shopee_profit.models.cell import Cell, Grid, cell_text, is_blank
from shopee_profit.models.order import OrderRecord
from shopee_profit.utils.import_logger import ImportLogger
from shopee_profit.utils.number_parser import parse_idr, parse_quantity
from shopee_profit.utils.status_classifier import classify_status

logger = logging.getLogger(__name__)


def _header_index(grid: Grid) -> int:
    """첫 번째 비어 있지 않은 행 (없으면 -1)"""
    for idx, row in enumerate(grid):
        if any(not is_blank(c) for c in row):
            return idx
    return -1


def _row_to_dict(headers: Sequence[str], row: Sequence[Cell]) -> Dict[str, Cell]:
    """헤더 → 셀 매핑 (중복 헤더는 첫 번째 컬럼 사용)"""
    record: Dict[str, Cell] = {}
    for col, header in enumerate(headers):
        if not header or header in record:
            continue
        record[header] = row[col] if col < len(row) else None
    return record


def pick(record: Dict[str, Cell], field_name: str) -> Cell:
    """
    필드 별칭 중 처음으로 값이 있는 셀

    숫자 0도 값이 없는 것으로 보고 다음 별칭으로 넘어간다
    (예: "Biaya Komisi"=0, "Commission Fee"=9500 → 9500).
    """
    for alias in ORDER_COLUMN_ALIASES[field_name]:
        value = record.get(alias)
        if is_blank(value) or value == 0:
            continue
        return value
    return None


def row_to_order(record: Dict[str, Cell]) -> Optional[OrderRecord]:
    """
    헤더 매핑된 행 → OrderRecord

    Returns:
        OrderRecord 또는 None (주문번호 없음)
    """
    order_id = cell_text(pick(record, "order_id")).strip()
    if not order_id:
        return None

    raw_status = cell_text(pick(record, "status"))
    estimated_income = parse_idr(pick(record, "estimated_income"))

    return OrderRecord(
        order_id=order_id,
        sku=cell_text(pick(record, "sku")).strip(),
        product_price=parse_idr(pick(record, "product_price")),
        quantity=parse_quantity(pick(record, "quantity")),
        status=classify_status(raw_status),
        raw_status=raw_status,
        shipping_subsidy=parse_idr(pick(record, "shipping_subsidy")),
        logistic_fee=parse_idr(pick(record, "logistic_fee")),
        # 원본 부호는 공제 표시일 뿐이므로 절댓값 사용
        raw_commission_fee=abs(parse_idr(pick(record, "commission_fee"))),
        raw_service_fee=abs(parse_idr(pick(record, "service_fee"))),
        estimated_income=estimated_income or None,
    )


def parse_orders(grid: Grid, import_log: Optional[ImportLogger] = None) -> List[OrderRecord]:
    """
    주문 시트 파싱

    Args:
        grid: 워크북 첫 시트 셀 목록
        import_log: 행 단위 결과 기록용 (없으면 내부 생성)

    Returns:
        OrderRecord 리스트 (원본 행 순서 유지)
    """
    import_log = import_log or ImportLogger("orders")

    header_idx = _header_index(grid)
    if header_idx == -1:
        logger.warning("주문표가 비어 있습니다")
        return []

    import_log.log_header(header_idx)
    headers = [cell_text(c).strip() for c in grid[header_idx]]

    orders = []
    for row_idx in range(header_idx + 1, len(grid)):
        row = grid[row_idx]
        if all(is_blank(c) for c in row):
            continue

        order = row_to_order(_row_to_dict(headers, row))
        if order is None:
            import_log.log_skipped(
                row_idx, "주문번호 없음",
                preview=", ".join(cell_text(c) for c in row[:5]),
            )
            continue

        orders.append(order)
        import_log.log_kept()

    logger.info(f"주문표 파싱 완료: {len(orders)}건")
    return orders
