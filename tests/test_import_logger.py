"""
import_logger.py 테스트
=======================
가져오기 결과 집계 및 JSON 리포트 저장 테스트
"""
import json
import sys
import tempfile
from pathlib import Path

# 프로젝트 루트 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

from shopee_profit.utils.import_logger import ImportLogger


class TestImportLogger:
    """ImportLogger 테스트"""

    def setup_method(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.log_dir = Path(self.temp_dir.name)

    def teardown_method(self):
        self.temp_dir.cleanup()

    def test_counts(self):
        import_log = ImportLogger("orders", source="order.xlsx", log_dir=self.log_dir)
        import_log.log_header(0)
        import_log.log_kept()
        import_log.log_kept(2)
        import_log.log_skipped(4, "주문번호 없음", preview="x" * 500)

        assert import_log.has_skipped
        summary = import_log.get_summary()
        assert summary["kept_count"] == 3
        assert summary["skipped_count"] == 1

        result = import_log.end_import()
        assert result.total_rows == 4
        assert result.header_row == 0
        assert result.skipped[0]["reason"] == "주문번호 없음"
        # 미리보기는 200자로 자름
        assert len(result.skipped[0]["preview"]) == 200
        assert list(self.log_dir.iterdir()) == []

    def test_max_skipped(self):
        import_log = ImportLogger("costs", log_dir=self.log_dir, max_skipped=2)
        for i in range(5):
            import_log.log_skipped(i, "SKU 없음")
        result = import_log.end_import()
        assert result.skipped_count == 5
        assert len(result.skipped) == 2

    def test_save_report(self):
        import_log = ImportLogger("ads", source="ads.csv", log_dir=self.log_dir)
        import_log.log_kept()
        import_log.end_import(save_report=True)

        files = list(self.log_dir.glob("import_ads_*.json"))
        assert len(files) == 1
        data = json.loads(files[0].read_text(encoding="utf-8"))
        assert data["sheet_type"] == "ads"
        assert data["source"] == "ads.csv"
        assert data["kept_count"] == 1
