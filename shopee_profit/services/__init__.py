"""서비스 모듈"""
from shopee_profit.services.workbook_loader import load_grid
from shopee_profit.services.schema_detector import HeaderFound, HeaderNotFound, detect_columns
from shopee_profit.services.order_ingestor import parse_orders
from shopee_profit.services.cost_ingestor import parse_costs, build_cost_map
from shopee_profit.services.ads_ingestor import parse_ads
from shopee_profit.services.fee_engine import calculate_order, calculate_orders
from shopee_profit.services.rate_learner import learn_commission_rates, LearningResult
from shopee_profit.services.report import summarize, format_report
from shopee_profit.services.report_export import export_report_excel
from shopee_profit.services.profit_session import ProfitSession

__all__ = [
    'load_grid',
    'HeaderFound',
    'HeaderNotFound',
    'detect_columns',
    'parse_orders',
    'parse_costs',
    'build_cost_map',
    'parse_ads',
    'calculate_order',
    'calculate_orders',
    'learn_commission_rates',
    'LearningResult',
    'summarize',
    'format_report',
    'export_report_excel',
    'ProfitSession',
]
