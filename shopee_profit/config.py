"""애플리케이션 설정"""
from pydantic_settings import BaseSettings

from shopee_profit.constants import (
    DEFAULT_EXCHANGE_RATE, DEFAULT_COMMISSION_RATE, DEFAULT_SERVICE_RATE,
    DEFAULT_PROCESSING_FEE, DEFAULT_XTRA_RATE, HEADER_SCAN_ROWS,
)


class Settings(BaseSettings):
    """환경변수 기반 설정 (수수료 기본값은 대시보드/CLI에서 덮어쓸 수 있음)"""

    # Fee defaults
    exchange_rate: float = DEFAULT_EXCHANGE_RATE
    commission_rate: float = DEFAULT_COMMISSION_RATE
    service_rate: float = DEFAULT_SERVICE_RATE
    processing_fee_fixed: float = DEFAULT_PROCESSING_FEE
    xtra_enabled: bool = False
    xtra_rate: float = DEFAULT_XTRA_RATE

    # Import
    header_scan_rows: int = HEADER_SCAN_ROWS
    save_import_reports: bool = False

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = False


# 전역 설정 인스턴스
settings = Settings()
