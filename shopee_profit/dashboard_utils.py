"""
대시보드 공통 유틸리티
=====================
세션 보관, 금액 포맷터, AgGrid/KPI 래퍼 등 페이지에서 공유하는 함수.
"""
import streamlit as st
import pandas as pd
from st_aggrid import AgGrid, GridOptionsBuilder

from shopee_profit.config import settings
from shopee_profit.models.fee_config import FeeConfig
from shopee_profit.services.profit_session import ProfitSession

_SESSION_KEY = "profit_session"


# ─── 세션 ───

def get_session() -> ProfitSession:
    """브라우저 세션별 ProfitSession (최초 1회 생성)"""
    if _SESSION_KEY not in st.session_state:
        st.session_state[_SESSION_KEY] = ProfitSession(
            FeeConfig.from_settings(settings),
            save_reports=settings.save_import_reports,
            header_scan_rows=settings.header_scan_rows,
        )
    return st.session_state[_SESSION_KEY]


# ─── 포맷터 ───

def fmt_idr(val) -> str:
    """인도네시아 루피아 표시 (Rp 12,345 / 음수는 -Rp)"""
    val = round(val or 0)
    sign = "-" if val < 0 else ""
    return f"{sign}Rp {abs(val):,}"


def fmt_rmb(val) -> str:
    """위안 표시 (¥12.34)"""
    return f"¥{(val or 0):,.2f}"


# ─── AgGrid 래퍼 ───

# 표시 형식: 컬럼명 접미사 → AgGrid valueFormatter 식 (x = 셀 값)
_IDR_FORMATTER = "x == null ? '' : 'Rp ' + Math.round(x).toLocaleString('id-ID')"
_RMB_FORMATTER = "x == null ? '' : '¥' + x.toFixed(2)"
_RATE_FORMATTER = "x == null ? '' : (x * 100).toFixed(2) + '%'"


def render_grid(df: pd.DataFrame, key: str, height: int = 450,
                page_size: int = 25, pinned_cols=("주문번호",), wide_cols: dict = None):
    """
    주문 분해 테이블 (AgGrid)

    금액 컬럼은 이름 접미사로 형식을 정한다: "(IDR)" → Rp, "(RMB)" → ¥, "수수료율" → %.
    pinned_cols는 가로 스크롤 시 왼쪽에 고정.
    """
    gb = GridOptionsBuilder.from_dataframe(df)
    gb.configure_pagination(paginationAutoPageSize=False, paginationPageSize=page_size)
    gb.configure_default_column(resizable=True, sortable=True, filter=True)
    for col in df.columns:
        if col.endswith("(IDR)"):
            gb.configure_column(col, type=["numericColumn"], valueFormatter=_IDR_FORMATTER)
        elif col.endswith("(RMB)"):
            gb.configure_column(col, type=["numericColumn"], valueFormatter=_RMB_FORMATTER)
        elif col.endswith("수수료율"):
            gb.configure_column(col, type=["numericColumn"], valueFormatter=_RATE_FORMATTER)
    for col in pinned_cols:
        if col in df.columns:
            gb.configure_column(col, pinned="left")
    for col, width in (wide_cols or {}).items():
        gb.configure_column(col, width=width)
    return AgGrid(df, gridOptions=gb.build(), height=height, theme="streamlit", key=key)


# ─── KPI 카드 ───

def render_kpi_row(tiles: list):
    """
    KPI 카드 행

    tiles: [(label, value, note?), ...]
    note는 변화량이 아니라 환산 전 금액 등 참고값이므로 색 없이 표시한다.
    """
    cols = st.columns(len(tiles))
    for col, (label, value, *rest) in zip(cols, tiles):
        note = rest[0] if rest else None
        col.metric(label, value, delta=note, delta_color="off")
