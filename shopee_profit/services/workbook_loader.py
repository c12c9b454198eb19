"""
워크북 로더
==========
엑셀(.xlsx) / CSV 첫 시트 → Grid (헤더 없이 2차원 셀 목록)

경로, bytes, 파일 객체(Streamlit UploadedFile 포함)를 모두 받는다.
읽기 실패는 WorkbookReadError로 통일해 해당 시트만 실패시킨다.
"""
import io
import logging
from pathlib import Path
from typing import Optional, Union, BinaryIO

import pandas as pd

from shopee_profit.exceptions import WorkbookReadError
from shopee_profit.models.cell import Grid, to_cell

logger = logging.getLogger(__name__)

Source = Union[str, Path, bytes, BinaryIO]

EXCEL_SUFFIXES = {".xlsx", ".xlsm"}
CSV_SUFFIXES = {".csv"}


def _source_name(source: Source, filename: Optional[str]) -> str:
    if filename:
        return filename
    if isinstance(source, (str, Path)):
        return str(source)
    return getattr(source, "name", "") or ""


def _csv_number(value):
    """CSV 텍스트 셀 중 순수 숫자 리터럴("100000.50")만 숫자로 변환 (엑셀 셀과 같은 타입)"""
    if not isinstance(value, str):
        return value
    number = pd.to_numeric(value.strip(), errors="coerce")
    if pd.isna(number):
        return value
    return float(number)


def _read_frame(source: Source, suffix: str) -> pd.DataFrame:
    """첫 시트를 헤더 없이 object 타입으로 읽기"""
    if isinstance(source, bytes):
        source = io.BytesIO(source)
    if suffix in CSV_SUFFIXES:
        df = pd.read_csv(source, header=None, dtype=object, keep_default_na=False, na_values=[""])
        return df.apply(lambda col: col.map(_csv_number))
    return pd.read_excel(source, sheet_name=0, header=None, dtype=object, engine="openpyxl")


def frame_to_grid(df: pd.DataFrame) -> Grid:
    """DataFrame → Grid (행 끝의 빈칸은 잘라냄)"""
    grid: Grid = []
    for values in df.itertuples(index=False, name=None):
        row = [to_cell(v) for v in values]
        while row and row[-1] is None:
            row.pop()
        grid.append(row)
    return grid


def load_grid(source: Source, filename: Optional[str] = None) -> Grid:
    """
    워크북 첫 시트 읽기

    Args:
        source: 파일 경로, bytes, 파일 객체
        filename: 확장자 판단용 파일명 (source에서 알 수 없을 때)

    Returns:
        Grid

    Raises:
        WorkbookReadError: 지원하지 않는 형식이거나 파일이 손상된 경우
    """
    name = _source_name(source, filename)
    suffix = Path(name).suffix.lower() if name else ".xlsx"

    if suffix not in EXCEL_SUFFIXES | CSV_SUFFIXES:
        raise WorkbookReadError(f"지원하지 않는 파일 형식입니다: {suffix} (xlsx/csv만 지원)", source=name)

    try:
        df = _read_frame(source, suffix)
    except Exception as e:
        logger.error(f"워크북 읽기 실패: {name}: {type(e).__name__}: {e}")
        raise WorkbookReadError(f"파일을 읽을 수 없습니다: {name} ({e})", source=name) from e

    grid = frame_to_grid(df)
    logger.info(f"워크북 로드: {name} → {len(grid)}행")
    return grid
