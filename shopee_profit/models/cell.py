"""
셀 값 타입
==========
워크북에서 읽은 원시 값은 입력 경계(workbook_loader)에서 한 번만
숫자(float) / 텍스트(str) / 빈칸(None) 세 가지로 정리한다.
이후 계산 코드는 원시 셀 타입을 다시 검사하지 않는다.
"""
import math
from datetime import date, datetime
from typing import Any, List, Optional, Union

Cell = Optional[Union[float, str]]
Grid = List[List[Cell]]


def to_cell(value: Any) -> Cell:
    """원시 셀 값 → Cell"""
    if value is None:
        return None
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, (int, float)):
        if isinstance(value, float) and math.isnan(value):
            return None
        return float(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    # numpy 스칼라 등
    if hasattr(value, "item") and not isinstance(value, str):
        try:
            return to_cell(value.item())
        except (TypeError, ValueError):
            pass
    text = str(value)
    if not text.strip():
        return None
    return text


def cell_text(cell: Cell) -> str:
    """Cell → 표시용 문자열 (정수 값은 소수점 없이)"""
    if cell is None:
        return ""
    if isinstance(cell, float):
        if math.isfinite(cell) and cell.is_integer():
            return str(int(cell))
        return str(cell)
    return str(cell)


def is_blank(cell: Cell) -> bool:
    """빈칸 여부 (None 또는 공백 문자열)"""
    return cell is None or (isinstance(cell, str) and not cell.strip())
