"""
Shopee ID 수익 리포트 (CLI)
==========================
주문표(+원가표/광고 보고서)를 읽어 요약 리포트를 출력한다.

사용법:
    python scripts/profit_report.py --orders Order.all.xlsx
    python scripts/profit_report.py --orders Order.all.xlsx --costs costs.xlsx --ads ads.csv
    python scripts/profit_report.py --orders Order.all.xlsx --learn-rates --export report.xlsx
"""
import sys
import logging
import argparse
from pathlib import Path

# 프로젝트 루트 설정
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT))

from dotenv import load_dotenv
load_dotenv(ROOT / ".env")

from shopee_profit.config import settings
from shopee_profit.exceptions import ProfitStationError
from shopee_profit.models.fee_config import FeeConfig
from shopee_profit.services.profit_session import ProfitSession
from shopee_profit.services.report import format_report
from shopee_profit.services.report_export import export_report_excel

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Shopee ID 주문 수익 리포트")
    parser.add_argument("--orders", required=True, help="주문표 (xlsx/csv)")
    parser.add_argument("--costs", help="원가표 (xlsx/csv)")
    parser.add_argument("--ads", help="광고 보고서 (xlsx/csv)")
    parser.add_argument("--exchange-rate", type=float, default=None,
                        help=f"환율 IDR/RMB (기본: {settings.exchange_rate:g})")
    parser.add_argument("--xtra", action="store_true", help="XTRA 프로그램 수수료 적용")
    parser.add_argument("--learn-rates", action="store_true", help="주문표 실제 수수료로 SKU 요율 학습")
    parser.add_argument("--export", help="Excel 리포트 저장 경로")
    parser.add_argument("--save-import-reports", action="store_true",
                        help="가져오기 결과를 logs/에 JSON으로 저장")
    parser.add_argument("--verbose", "-v", action="store_true", help="DEBUG 로그 출력")
    return parser


def run(args) -> ProfitSession:
    """인자대로 세션을 채우고 반환 (가져오기 실패 시 ProfitStationError)"""
    config = FeeConfig.from_settings(settings)
    changes = {}
    if args.exchange_rate is not None:
        changes["exchange_rate"] = args.exchange_rate
    if args.xtra:
        changes["xtra_enabled"] = True
    if changes:
        config = config.replace(**changes)

    session = ProfitSession(
        config,
        save_reports=args.save_import_reports or settings.save_import_reports,
        header_scan_rows=settings.header_scan_rows,
    )

    session.import_orders(args.orders)
    if args.costs:
        session.import_costs(args.costs)
    if args.ads:
        session.import_ads(args.ads)

    if args.learn_rates:
        updated = session.learn_rates()
        if updated > 0:
            logger.info(f"SKU 수수료율 {updated}개 갱신")
        else:
            logger.info("주문표에 학습할 수수료 정보가 없습니다")

    return session


def main(argv=None):
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format='[%(asctime)s] %(levelname)s [%(name)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )

    try:
        session = run(args)
    except ProfitStationError as e:
        logger.error(f"리포트 생성 실패: {e}")
        sys.exit(1)

    summary = session.summary()
    print(format_report(summary, session.config.exchange_rate))

    if args.export:
        export_report_excel(session.calculated_orders(), summary, args.export)
        print(f"\nExcel 저장: {args.export}")


if __name__ == "__main__":
    main()
