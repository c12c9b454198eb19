"""
Shopee ID 수익 계산 대시보드
===========================
주문표/원가표/광고 보고서 업로드 → 주문별 수수료 분해 + 순이익(RMB)
실행: streamlit run dashboard.py
"""
import sys
import logging
from pathlib import Path

import streamlit as st

# 프로젝트 루트를 path에 추가
ROOT = Path(__file__).parent
sys.path.insert(0, str(ROOT))

from dotenv import load_dotenv
load_dotenv(ROOT / ".env")

from shopee_profit.config import settings
from shopee_profit.dashboard_utils import get_session, fmt_idr
from shopee_profit.exceptions import ConfigError, ProfitStationError
from shopee_profit.pages import profit

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format='[%(asctime)s] %(levelname)s [%(name)s] %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
)
logger = logging.getLogger(__name__)

# ─── 페이지 설정 ───
st.set_page_config(page_title="Shopee 수익 계산", page_icon="📦", layout="wide")

session = get_session()

_UPLOAD_TYPES = ["xlsx", "xlsm", "csv"]


def _import(kind: str, uploaded):
    """업로드 파일 가져오기 (실패 시 기존 데이터 유지)"""
    try:
        if kind == "orders":
            count = session.import_orders(uploaded.getvalue(), uploaded.name)
            st.sidebar.success(f"주문 {count}건 불러옴 (원가/광고비 초기화)")
        elif kind == "costs":
            count = session.import_costs(uploaded.getvalue(), uploaded.name)
            st.sidebar.success(f"원가 {count}행 불러옴")
        else:
            spend = session.import_ads(uploaded.getvalue(), uploaded.name)
            st.sidebar.success(f"광고비 {fmt_idr(spend)}")
    except ProfitStationError as e:
        logger.warning(f"가져오기 실패 ({kind}, {uploaded.name}): {e}")
        st.sidebar.error(str(e))


# ─── 사이드바: 파일 ───
st.sidebar.title("📦 Shopee ID")
st.sidebar.subheader("파일 가져오기")

_uploads = [
    ("orders", "주문표 (Order.all)"),
    ("ads", "광고 보고서"),
    ("costs", "원가표 (SKU / 원가 / 배수)"),
]
for _kind, _label in _uploads:
    _file = st.sidebar.file_uploader(_label, type=_UPLOAD_TYPES, key=f"upload_{_kind}")
    if _file is not None and st.sidebar.button("가져오기", key=f"import_{_kind}"):
        _import(_kind, _file)

st.sidebar.caption(
    f"주문 {len(session.orders)}건 · 원가 {len(session.costs)}행 · 광고비 {fmt_idr(session.ads_spend_idr)}"
)

# ─── 사이드바: 설정 ───
st.sidebar.divider()
st.sidebar.subheader("수수료 설정")
cfg = session.config
exchange_rate = st.sidebar.number_input("환율 (IDR / 1 RMB)", value=float(cfg.exchange_rate), step=5.0)
commission_pct = st.sidebar.number_input("기본 수수료율 (%)", value=cfg.commission_rate * 100, step=0.25, format="%.2f")
service_pct = st.sidebar.number_input("서비스비율 (%)", value=cfg.service_rate * 100, step=0.25, format="%.2f")
processing_fee = st.sidebar.number_input("주문 처리비 (IDR)", value=float(cfg.processing_fee_fixed), step=50.0)
xtra_enabled = st.sidebar.toggle("XTRA 프로그램", value=cfg.xtra_enabled)
xtra_pct = st.sidebar.number_input("XTRA 비율 (%)", value=cfg.xtra_rate * 100, step=0.5, format="%.2f",
                                   disabled=not xtra_enabled)

try:
    new_config = cfg.replace(
        exchange_rate=exchange_rate,
        commission_rate=commission_pct / 100,
        service_rate=service_pct / 100,
        processing_fee_fixed=processing_fee,
        xtra_enabled=xtra_enabled,
        xtra_rate=xtra_pct / 100,
    )
    if new_config != cfg:
        session.set_config(new_config)
except ConfigError as e:
    st.sidebar.error(str(e))

if st.sidebar.button("주문에서 수수료율 학습", disabled=not session.orders):
    updated = session.learn_rates()
    if updated > 0:
        st.sidebar.success(f"SKU {updated}개 수수료율 갱신")
    else:
        st.sidebar.info("주문표에 학습할 수수료 정보가 없습니다.")

# ─── 본문 ───
profit.render(session)
