"""
수익성 집계 리포트
=================
유효 주문(완료/배송/결제) 기준 매출·수수료·수입·원가 합계와
광고비 반영 최종 순이익, 이익률 계산.

최종 순이익(RMB) = 수입/환율 - 매칭 원가 - 광고비/환율
이익률(%) = 최종 순이익 / (매출/환율) × 100  (매출 0이면 0)
"""
from typing import Dict, Iterable

from shopee_profit.models.calculated import CalculatedOrder
from shopee_profit.models.fee_config import FeeConfig
from shopee_profit.models.order import OrderStatus, SUCCESSFUL_STATUSES
from shopee_profit.models.summary import SummaryStatistics


def summarize(
    calculated: Iterable[CalculatedOrder],
    ads_spend_idr: float,
    config: FeeConfig,
    has_costs: bool,
) -> SummaryStatistics:
    """
    집계 통계 생성

    Args:
        calculated: 계산된 주문
        ads_spend_idr: 광고비 합계 (IDR)
        config: 수수료 설정 (환율 사용)
        has_costs: 원가표 로드 여부

    Returns:
        SummaryStatistics
    """
    counts: Dict[OrderStatus, int] = {s: 0 for s in OrderStatus}
    total_sales = 0.0
    total_fees = 0.0
    total_income = 0.0
    total_cost_rmb = 0.0

    for o in calculated:
        counts[o.status] += 1
        if o.status not in SUCCESSFUL_STATUSES:
            continue
        total_sales += o.product_price
        total_fees += o.fees_total
        total_income += o.net_income_idr
        if o.is_matched_cost:
            total_cost_rmb += o.line_cost_rmb

    rate = config.exchange_rate
    total_income_rmb = total_income / rate
    total_ads_rmb = ads_spend_idr / rate
    final_net_profit = total_income_rmb - total_cost_rmb - total_ads_rmb
    margin = final_net_profit / (total_sales / rate) * 100 if total_sales > 0 else 0.0

    return SummaryStatistics(
        counts=counts,
        total_sales_idr=total_sales,
        total_fees_idr=total_fees,
        total_income_idr=total_income,
        total_income_rmb=total_income_rmb,
        total_cost_rmb=total_cost_rmb,
        total_ads_rmb=total_ads_rmb,
        final_net_profit_rmb=final_net_profit,
        margin=margin,
        has_costs=has_costs,
    )


def format_report(summary: SummaryStatistics, exchange_rate: float = None) -> str:
    """
    수익성 리포트 문자열

    Args:
        summary: summarize() 결과
        exchange_rate: 표시용 환율 (없으면 생략)

    Returns:
        포맷된 리포트 문자열
    """
    report = []
    report.append("\n" + "=" * 60)
    report.append("Shopee ID 수익성 리포트")
    report.append("=" * 60)

    report.append(f"\n총 주문: {summary.total_orders}건")
    if exchange_rate:
        report.append(f"환율: 1 RMB = {exchange_rate:,.0f} IDR")

    report.append("\n[주문 상태]")
    for status, count in summary.counts.items():
        if count > 0:
            report.append(f"  {status.value:12s}: {count:5d}건")
    report.append(f"  완료(배송 포함): {summary.completed_count}건 / 취소(실패 포함): {summary.cancelled_count}건")

    report.append("\n[유효 주문 합계]")
    report.append(f"  매출:       Rp {summary.total_sales_idr:,.0f}")
    report.append(f"  수수료:     Rp {summary.total_fees_idr:,.0f}")
    report.append(f"  예상 수입:  Rp {summary.total_income_idr:,.0f} (¥{summary.total_income_rmb:,.2f})")
    report.append(f"  광고비:     ¥{summary.total_ads_rmb:,.2f}")

    report.append("\n[순이익]")
    if summary.has_costs:
        report.append(f"  원가:       ¥{summary.total_cost_rmb:,.2f}")
        report.append(f"  최종 순이익: ¥{summary.final_net_profit_rmb:,.2f}")
        report.append(f"  이익률:     {summary.margin:.2f}%")
    else:
        report.append("  원가표가 없어 순이익을 계산하지 않았습니다")

    report.append("\n" + "=" * 60)

    return "\n".join(report)
