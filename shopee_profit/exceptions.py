"""도메인 예외"""
from typing import List


class ProfitStationError(Exception):
    """모든 도메인 예외의 기반 클래스"""
    pass


class WorkbookReadError(ProfitStationError):
    """엑셀/CSV 파일을 읽을 수 없음 (해당 시트만 실패)"""

    def __init__(self, message: str, source: str = ""):
        super().__init__(message)
        self.source = source


class CostHeaderNotFoundError(ProfitStationError):
    """
    원가표 헤더(SKU + 원가 컬럼)를 찾지 못함

    sample_rows에 앞쪽 행 내용을 담아 운영자가 컬럼명을 고칠 수 있게 한다.
    """

    def __init__(self, sample_rows: List[str]):
        self.sample_rows = sample_rows
        sample = " | ".join(sample_rows)
        super().__init__(
            "원가표 헤더를 인식할 수 없습니다.\n"
            f"앞쪽 행에서 읽은 내용: [{sample}]\n\n"
            '"SKU" 컬럼과 "COST_RMB"(또는 "成本") 컬럼이 같은 행에 있는지 확인하세요.'
        )


class ConfigError(ProfitStationError):
    """수수료 설정 값이 유효하지 않음"""

    def __init__(self, errors):
        self.errors = list(errors)
        details = ", ".join(f"{e.field}: {e.message}" for e in self.errors)
        super().__init__(f"설정 값 오류: {details}")
