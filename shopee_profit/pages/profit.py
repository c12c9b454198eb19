"""
수익 분석 페이지
================
KPI(수입/광고비/순이익/이익률/상태) + 주문별 수수료 분해 테이블.

순이익 = 예상수입/환율 - 원가 - 광고비/환율
"""

import plotly.graph_objects as go
import streamlit as st

from shopee_profit.dashboard_utils import fmt_idr, fmt_rmb, render_grid, render_kpi_row
from shopee_profit.models.order import OrderStatus
from shopee_profit.services.profit_session import ProfitSession
from shopee_profit.services.report_export import export_report_excel, orders_to_dataframe

# 펼침 상세를 그릴 최대 주문 수
MAX_DETAIL_ROWS = 100

_STATUS_COLORS = {
    OrderStatus.COMPLETED: "#10b981",
    OrderStatus.DELIVERED: "#059669",
    OrderStatus.PAID: "#3b82f6",
    OrderStatus.IN_PROGRESS: "#94a3b8",
    OrderStatus.CANCELLED: "#ef4444",
    OrderStatus.FAILED: "#64748b",
    OrderStatus.UNKNOWN: "#cbd5e1",
}


def render(session: ProfitSession):
    """수익 분석 페이지"""

    st.title("Shopee ID 수익 분석")

    if not session.orders:
        st.info("왼쪽에서 주문표를 먼저 가져오세요.")
        return

    calculated = session.calculated_orders()
    summary = session.summary()
    config = session.config

    _render_kpi(summary, session.ads_spend_idr, config.exchange_rate)

    col_chart, col_note = st.columns([3, 2])
    with col_chart:
        _render_status_chart(summary)
    with col_note:
        st.caption(f"환율: 1 RMB = {config.exchange_rate:,.0f} IDR")
        st.caption(f"학습된 SKU 수수료율: {len(config.sku_commission_rates)}개")
        if not summary.has_costs:
            st.warning("원가표가 없어 순이익/이익률을 표시하지 않습니다.")

    st.divider()

    # ── 주문 테이블 ──
    st.subheader(f"주문 명세 ({len(calculated)})")
    df = orders_to_dataframe(calculated)
    render_grid(df, key="profit_orders", wide_cols={"주문번호": 180, "SKU": 160})

    st.download_button(
        "Excel 다운로드",
        data=export_report_excel(calculated, summary),
        file_name="shopee_profit_report.xlsx",
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    )

    # ── 주문별 상세 (취소/실패 제외) ──
    st.subheader("수수료 상세")
    shown = 0
    for o in calculated:
        if o.is_cancelled:
            continue
        if shown >= MAX_DETAIL_ROWS:
            st.caption(f"상세는 앞쪽 {MAX_DETAIL_ROWS}건만 표시합니다. 전체는 Excel로 확인하세요.")
            break
        shown += 1
        order_id, sku = o.expand_key
        with st.expander(f"{order_id} · {sku or '알 수 없는 SKU'} · {o.raw_status or o.status.value}"):
            _render_order_detail(o, config.exchange_rate, summary.has_costs)


def _render_kpi(summary, ads_spend_idr, exchange_rate):
    """KPI 카드"""
    if summary.has_costs:
        profit_label = fmt_rmb(summary.final_net_profit_rmb)
        margin_label = f"{summary.margin:.2f}%"
    else:
        profit_label = "원가표 없음"
        margin_label = "-"

    render_kpi_row([
        ("총 수입 (유효 주문)", fmt_rmb(summary.total_income_rmb), f"Income / {exchange_rate:,.0f}"),
        ("광고비", fmt_rmb(summary.total_ads_rmb), fmt_idr(ads_spend_idr)),
        ("최종 순이익 (RMB)", profit_label),
        ("이익률", margin_label),
        ("완료 / 취소", f"{summary.completed_count} / {summary.cancelled_count}"),
    ])


def _render_status_chart(summary):
    """상태별 주문 수 막대그래프"""
    statuses = [s for s, c in summary.counts.items() if c > 0]
    fig = go.Figure(go.Bar(
        x=[s.value for s in statuses],
        y=[summary.counts[s] for s in statuses],
        marker_color=[_STATUS_COLORS[s] for s in statuses],
    ))
    fig.update_layout(height=260, margin=dict(l=10, r=10, t=30, b=10), title="상태별 주문 수")
    st.plotly_chart(fig, use_container_width=True)


def _actual_tag(is_actual: bool) -> str:
    return "Actual" if is_actual else "Est"


def _render_order_detail(o, exchange_rate, has_costs):
    """주문 1건 수수료 분해"""
    c1, c2, c3, c4 = st.columns(4)
    with c1:
        st.caption("주문 금액")
        st.text(f"판매가      {fmt_idr(o.product_price)}")
        st.text(f"배송 보조금  {fmt_idr(o.shipping_subsidy)}")
    with c2:
        st.caption("플랫폼 수수료")
        st.text(f"수수료 [{_actual_tag(o.is_commission_actual)}] {fmt_idr(-o.commission_fee)}")
        st.text(f"  ({o.commission_source.value}, {o.commission_rate_used:.2%})")
        st.text(f"서비스비 [{_actual_tag(o.is_service_actual)}] {fmt_idr(-o.service_fee)}")
        st.text(f"처리비        {fmt_idr(-o.processing_fee)}")
        if o.xtra_fee > 0:
            st.text(f"XTRA          {fmt_idr(-o.xtra_fee)}")
    with c3:
        st.caption("합계")
        st.text(f"수수료 합계   {fmt_idr(-o.fees_total)}")
        st.text(f"예상 수입 [{_actual_tag(o.is_income_actual)}] {fmt_idr(o.net_income_idr)}")
    with c4:
        st.caption("RMB 환산")
        st.metric("예상 수입", fmt_rmb(o.net_income_idr / exchange_rate))
        if has_costs and o.is_matched_cost:
            st.metric("순이익", fmt_rmb(o.net_profit_rmb), delta=f"원가 {fmt_rmb(o.line_cost_rmb)}", delta_color="off")
        else:
            st.caption("원가 미매칭")
