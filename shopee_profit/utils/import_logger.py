"""
가져오기 로거 모듈
==================
시트 가져오기의 유지/건너뜀 행 기록, JSON 리포트 생성

사용법:
    import_log = ImportLogger("orders", source="order.xlsx")
    import_log.log_kept()
    import_log.log_skipped(row_index=12, reason="주문번호 없음")
    report = import_log.end_import()
"""
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Any, Optional
from dataclasses import dataclass, asdict

logger = logging.getLogger(__name__)

# 기본 로그 디렉토리
DEFAULT_LOG_DIR = Path(__file__).parent.parent.parent / "logs"


@dataclass
class SkippedRow:
    """건너뛴 행"""
    row_index: int
    reason: str
    preview: Optional[str] = None


@dataclass
class ImportResult:
    """가져오기 결과 요약"""
    sheet_type: str
    source: str
    started_at: str
    ended_at: str
    duration_seconds: float
    total_rows: int
    kept_count: int
    skipped_count: int
    header_row: Optional[int]
    skipped: List[Dict]


class ImportLogger:
    """
    가져오기 로거

    시트 한 번 가져올 때의 행 단위 결과를 모아 요약한다.

    Attributes:
        sheet_type: 시트 종류 (orders, costs, ads)
        source: 원본 파일명
    """

    def __init__(
        self,
        sheet_type: str,
        source: str = "",
        log_dir: Optional[Path] = None,
        max_skipped: int = 1000,
    ):
        """
        Args:
            sheet_type: 시트 종류 이름
            source: 원본 파일명 (리포트 표시용)
            log_dir: 리포트 저장 디렉토리 (None=기본)
            max_skipped: 저장할 최대 건너뜀 항목 수
        """
        self.sheet_type = sheet_type
        self.source = source
        self.log_dir = log_dir or DEFAULT_LOG_DIR
        self.max_skipped = max_skipped

        self.started_at = datetime.now()
        self.ended_at: Optional[datetime] = None
        self.header_row: Optional[int] = None

        self._skipped: List[SkippedRow] = []
        self._kept_count = 0
        self._skipped_count = 0

    def log_header(self, row_index: int):
        """탐지된 헤더 행 기록"""
        self.header_row = row_index

    def log_kept(self, count: int = 1):
        """유지된 행 기록"""
        self._kept_count += count

    def log_skipped(self, row_index: int, reason: str, preview: Optional[str] = None):
        """
        건너뛴 행 기록

        Args:
            row_index: 시트 기준 행 번호 (0부터)
            reason: 건너뛴 이유
            preview: 행 내용 일부
        """
        self._skipped_count += 1
        logger.debug(f"[{self.sheet_type}] {row_index}행 건너뜀: {reason}")

        if len(self._skipped) < self.max_skipped:
            self._skipped.append(SkippedRow(
                row_index=row_index,
                reason=reason,
                preview=str(preview)[:200] if preview else None,
            ))

    def end_import(self, save_report: bool = False) -> ImportResult:
        """
        가져오기 종료 및 결과 생성

        Args:
            save_report: JSON 파일로 저장할지 여부

        Returns:
            ImportResult 객체
        """
        self.ended_at = datetime.now()
        duration = (self.ended_at - self.started_at).total_seconds()

        result = ImportResult(
            sheet_type=self.sheet_type,
            source=self.source,
            started_at=self.started_at.isoformat(),
            ended_at=self.ended_at.isoformat(),
            duration_seconds=round(duration, 2),
            total_rows=self._kept_count + self._skipped_count,
            kept_count=self._kept_count,
            skipped_count=self._skipped_count,
            header_row=self.header_row,
            skipped=[asdict(s) for s in self._skipped],
        )

        if save_report:
            self._save_report(result)

        logger.info(
            f"[{self.sheet_type}] 가져오기 완료: "
            f"유지 {self._kept_count}건, "
            f"건너뜀 {self._skipped_count}건"
            + (f" ({self.source})" if self.source else "")
        )

        return result

    def _save_report(self, result: ImportResult):
        """JSON 리포트 파일 저장"""
        date_str = self.started_at.strftime("%Y%m%d_%H%M%S")
        filepath = self.log_dir / f"import_{self.sheet_type}_{date_str}.json"

        try:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            with open(filepath, "w", encoding="utf-8") as f:
                json.dump(asdict(result), f, ensure_ascii=False, indent=2)
            logger.info(f"리포트 저장: {filepath}")
        except OSError as e:
            logger.error(f"리포트 저장 실패: {e}")

    def get_summary(self) -> Dict[str, Any]:
        """현재까지의 요약 반환"""
        return {
            "sheet_type": self.sheet_type,
            "source": self.source,
            "kept_count": self._kept_count,
            "skipped_count": self._skipped_count,
            "header_row": self.header_row,
        }

    @property
    def has_skipped(self) -> bool:
        """건너뛴 행이 있는지"""
        return self._skipped_count > 0
