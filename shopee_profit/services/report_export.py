"""
리포트 Excel 내보내기
====================
주문별 수수료 분해 + 요약을 2개 시트 Excel로 저장
"""
import logging
from io import BytesIO
from pathlib import Path
from typing import Iterable, Optional, Union, BinaryIO

import pandas as pd
from openpyxl.styles import Font, PatternFill, Alignment, Border, Side
from openpyxl.utils import get_column_letter

from shopee_profit.models.calculated import CalculatedOrder
from shopee_profit.models.order import CANCELLED_STATUSES
from shopee_profit.models.summary import SummaryStatistics

logger = logging.getLogger(__name__)

# 주문 시트 컬럼 (속성명 → 표시명)
ORDER_COLUMNS = [
    ("order_id", "주문번호"),
    ("sku", "SKU"),
    ("raw_status", "상태(원본)"),
    ("status", "상태"),
    ("quantity", "수량"),
    ("product_price", "판매가(IDR)"),
    ("commission_fee", "수수료(IDR)"),
    ("commission_source", "수수료 출처"),
    ("commission_rate_used", "적용 수수료율"),
    ("service_fee", "서비스비(IDR)"),
    ("processing_fee", "처리비(IDR)"),
    ("xtra_fee", "XTRA(IDR)"),
    ("fees_total", "수수료합계(IDR)"),
    ("net_income_idr", "예상수입(IDR)"),
    ("is_income_actual", "실제수입 여부"),
    ("line_cost_rmb", "원가(RMB)"),
    ("is_matched_cost", "원가 매칭"),
    ("net_profit_rmb", "순이익(RMB)"),
]


def orders_to_dataframe(calculated: Iterable[CalculatedOrder]) -> pd.DataFrame:
    """CalculatedOrder → 표시용 DataFrame"""
    rows = []
    for o in calculated:
        row = {}
        for attr, label in ORDER_COLUMNS:
            value = getattr(o, attr)
            # Enum → 값 문자열
            row[label] = getattr(value, "value", value)
        rows.append(row)
    return pd.DataFrame(rows, columns=[label for _, label in ORDER_COLUMNS])


def summary_to_dataframe(summary: SummaryStatistics) -> pd.DataFrame:
    """SummaryStatistics → 항목/값 2열 DataFrame"""
    rows = [
        ("총 주문", summary.total_orders),
        ("완료(배송 포함)", summary.completed_count),
        ("취소(실패 포함)", summary.cancelled_count),
        ("매출(IDR)", round(summary.total_sales_idr)),
        ("수수료(IDR)", round(summary.total_fees_idr)),
        ("예상수입(IDR)", round(summary.total_income_idr)),
        ("예상수입(RMB)", round(summary.total_income_rmb, 2)),
        ("광고비(RMB)", round(summary.total_ads_rmb, 2)),
    ]
    if summary.has_costs:
        rows += [
            ("원가(RMB)", round(summary.total_cost_rmb, 2)),
            ("최종 순이익(RMB)", round(summary.final_net_profit_rmb, 2)),
            ("이익률(%)", round(summary.margin, 2)),
        ]
    for status, count in summary.counts.items():
        rows.append((f"상태: {status.value}", count))
    return pd.DataFrame(rows, columns=["항목", "값"])


def export_report_excel(
    calculated: Iterable[CalculatedOrder],
    summary: SummaryStatistics,
    target: Optional[Union[str, Path, BinaryIO]] = None,
) -> bytes:
    """
    Excel 리포트 생성

    Args:
        calculated: 계산된 주문
        summary: 집계 통계
        target: 저장 경로 (None이면 bytes만 반환)

    Returns:
        Excel 파일 bytes
    """
    orders_df = orders_to_dataframe(calculated)
    summary_df = summary_to_dataframe(summary)

    buf = BytesIO()
    with pd.ExcelWriter(buf, engine="openpyxl") as writer:
        summary_df.to_excel(writer, sheet_name="요약", index=False, startrow=1)
        _style_report_sheet(writer.sheets["요약"], summary_df, "수익성 요약")

        orders_df.to_excel(writer, sheet_name="주문", index=False, startrow=1)
        _style_report_sheet(writer.sheets["주문"], orders_df, "주문별 수수료 분해")

    data = buf.getvalue()
    if target is not None:
        if isinstance(target, (str, Path)):
            Path(target).write_bytes(data)
            logger.info(f"리포트 저장: {target}")
        else:
            target.write(data)
    return data


# 헤더 접미사 → 셀 표시 형식
_NUMBER_FORMATS = [
    ("(IDR)", "#,##0"),
    ("(RMB)", "#,##0.00"),
    ("수수료율", "0.00%"),
]
_CANCELLED_VALUES = {s.value for s in CANCELLED_STATUSES}


def _style_report_sheet(ws, df: pd.DataFrame, title: str):
    """
    리포트 시트 스타일링 (1행 제목, 2행 헤더, 3행부터 데이터)

    - 금액/요율 컬럼은 헤더 접미사로 표시 형식 지정
    - 취소/실패 주문 행은 회색 글씨
    - 열 너비는 DataFrame 값 길이 기준 (한글 헤더는 2배)
    """
    num_cols = max(len(df.columns), 1)
    header_fill = PatternFill(start_color="EE4D2D", end_color="EE4D2D", fill_type="solid")
    header_font = Font(bold=True, color="FFFFFF", size=10)
    muted_font = Font(color="999999")
    thin = Side(style="thin")
    border = Border(left=thin, right=thin, top=thin, bottom=thin)

    ws.merge_cells(start_row=1, start_column=1, end_row=1, end_column=num_cols)
    title_cell = ws.cell(row=1, column=1)
    title_cell.value = title
    title_cell.font = Font(bold=True, size=13)
    title_cell.alignment = Alignment(horizontal="center")

    for ci in range(1, len(df.columns) + 1):
        c = ws.cell(row=2, column=ci)
        c.fill = header_fill
        c.font = header_font
        c.alignment = Alignment(horizontal="center")
        c.border = border
    ws.freeze_panes = "A3"

    formats = {}
    for ci, header in enumerate(df.columns, start=1):
        for suffix, number_format in _NUMBER_FORMATS:
            if str(header).endswith(suffix):
                formats[ci] = number_format
                break

    statuses = list(df["상태"]) if "상태" in df.columns else [None] * len(df)
    for offset, status in enumerate(statuses):
        ri = 3 + offset
        muted = status in _CANCELLED_VALUES
        for ci in range(1, num_cols + 1):
            c = ws.cell(row=ri, column=ci)
            c.border = border
            if ci in formats:
                c.number_format = formats[ci]
            if muted:
                c.font = muted_font

    # 열 너비 (최소 10, 최대 40)
    for ci, header in enumerate(df.columns, start=1):
        longest = df[header].astype(str).str.len().max() if len(df) else 0
        width = max(len(str(header)) * 2, int(longest or 0) + 2, 10)
        ws.column_dimensions[get_column_letter(ci)].width = min(width, 40)
