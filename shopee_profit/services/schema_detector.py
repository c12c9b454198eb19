"""
헤더 자동 탐지 모듈
==================
헤더 위치가 고정되지 않은 시트(광고 보고서, 원가표)에서
앞쪽 N행을 훑어 헤더 행과 역할별 컬럼 인덱스를 찾는다.

결과는 HeaderFound / HeaderNotFound 두 가지로 돌려주며,
못 찾은 경우를 오류로 볼지(원가표) 0으로 볼지(광고)는 호출 측이 정한다.

사용법:
    result = detect_columns(grid, required=[SKU_ROLE, COST_ROLE], optional=[MULTIPLIER_ROLE])
    if isinstance(result, HeaderFound):
        sku_col = result.columns["sku"]
"""
import re
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Union

from shopee_profit.constants import (
    HEADER_SCAN_ROWS, HEADER_SAMPLE_ROWS,
    COST_SKU_PATTERNS, COST_PRICE_PATTERNS, COST_MULTIPLIER_PATTERNS,
    ADS_SPEND_EXACT, ADS_SPEND_PATTERNS,
)
from shopee_profit.models.cell import Cell, Grid, cell_text

_STRIP_RE = re.compile(r"[\s_-]")

NOT_FOUND = -1


def normalize_header(value) -> str:
    """헤더 비교용 정규화 (소문자 + 공백/하이픈/밑줄 제거)"""
    return _STRIP_RE.sub("", str(value).lower())


@dataclass(frozen=True)
class ColumnRole:
    """
    컬럼 역할 정의

    Attributes:
        name: 역할 이름 (결과 columns 키)
        synonyms: 헤더에 포함되면 매칭되는 토큰
        exact: 헤더 전체가 같아야 매칭되는 토큰
    """
    name: str
    synonyms: Sequence[str] = ()
    exact: Sequence[str] = ()

    def matches(self, cell: Cell) -> bool:
        if cell is None:
            return False
        header = normalize_header(cell_text(cell))
        if not header:
            return False
        if any(header == normalize_header(t) for t in self.exact):
            return True
        return any(normalize_header(t) in header for t in self.synonyms)

    def find_in(self, row: Sequence[Cell]) -> int:
        """행에서 처음 매칭되는 컬럼 인덱스 (없으면 -1)"""
        for idx, cell in enumerate(row):
            if self.matches(cell):
                return idx
        return NOT_FOUND


# ──── 역할 정의 ────
SKU_ROLE = ColumnRole("sku", synonyms=tuple(COST_SKU_PATTERNS))
COST_ROLE = ColumnRole("cost", synonyms=tuple(COST_PRICE_PATTERNS))
MULTIPLIER_ROLE = ColumnRole("multiplier", synonyms=tuple(COST_MULTIPLIER_PATTERNS))
SPEND_ROLE = ColumnRole("spend", synonyms=tuple(ADS_SPEND_PATTERNS), exact=tuple(ADS_SPEND_EXACT))


@dataclass(frozen=True)
class HeaderFound:
    """헤더 탐지 성공"""
    header_row: int
    columns: Dict[str, int] = field(default_factory=dict)

    def column(self, role_name: str) -> int:
        """역할 컬럼 인덱스 (선택 역할이 없으면 -1)"""
        return self.columns.get(role_name, NOT_FOUND)


@dataclass(frozen=True)
class HeaderNotFound:
    """헤더 탐지 실패 (앞쪽 행 샘플 포함)"""
    sample_rows: List[str] = field(default_factory=list)


DetectionResult = Union[HeaderFound, HeaderNotFound]


def sample_rows(grid: Grid, limit: int = HEADER_SAMPLE_ROWS) -> List[str]:
    """앞쪽 행 내용을 ", "로 이어 붙인 샘플 (빈 행 제외)"""
    samples = []
    for row in grid[:limit]:
        text = ", ".join(cell_text(c) for c in row)
        if text.strip(", "):
            samples.append(text)
    return samples


def detect_columns(
    grid: Grid,
    required: Sequence[ColumnRole],
    optional: Sequence[ColumnRole] = (),
    max_rows: int = HEADER_SCAN_ROWS,
) -> DetectionResult:
    """
    헤더 행 탐지

    Args:
        grid: 헤더 없는 2차원 셀 목록
        required: 같은 행에서 모두 찾아야 하는 역할
        optional: 헤더 행에서 추가로 찾을 역할 (없으면 -1)
        max_rows: 스캔할 최대 행 수

    Returns:
        HeaderFound 또는 HeaderNotFound
    """
    for row_idx, row in enumerate(grid[:max_rows]):
        if not row:
            continue

        found = {role.name: role.find_in(row) for role in required}
        if all(idx != NOT_FOUND for idx in found.values()):
            for role in optional:
                found[role.name] = role.find_in(row)
            return HeaderFound(header_row=row_idx, columns=found)

    return HeaderNotFound(sample_rows=sample_rows(grid))


def detect_ads_columns(grid: Grid, max_rows: int = HEADER_SCAN_ROWS) -> DetectionResult:
    """광고 보고서: 광고비 컬럼 탐지"""
    return detect_columns(grid, required=[SPEND_ROLE], max_rows=max_rows)


def detect_cost_columns(grid: Grid, max_rows: int = HEADER_SCAN_ROWS) -> DetectionResult:
    """원가표: SKU + 원가 (+ 배수) 컬럼 탐지"""
    return detect_columns(
        grid,
        required=[SKU_ROLE, COST_ROLE],
        optional=[MULTIPLIER_ROLE],
        max_rows=max_rows,
    )
