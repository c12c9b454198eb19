"""유틸리티 모듈"""

from .validators import FeeConfigValidator, ValidationError
from .import_logger import ImportLogger, ImportResult
from .number_parser import parse_idr, extract_number, parse_quantity
from .status_classifier import classify_status

__all__ = [
    "FeeConfigValidator",
    "ValidationError",
    "ImportLogger",
    "ImportResult",
    "parse_idr",
    "extract_number",
    "parse_quantity",
    "classify_status",
]
