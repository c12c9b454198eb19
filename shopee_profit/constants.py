"""비즈니스 상수 - 매직넘버/컬럼 별칭 중앙 관리"""

# ──── 수수료 기본값 (Shopee ID) ────
DEFAULT_EXCHANGE_RATE = 2425  # 1 RMB = ? IDR
DEFAULT_COMMISSION_RATE = 0.095  # 판매가의 9.5% (전역 기본 수수료율)
DEFAULT_SERVICE_RATE = 0.045  # 판매가의 4.5%
DEFAULT_PROCESSING_FEE = 1250  # 주문당 고정 처리비 (IDR)
DEFAULT_XTRA_RATE = 0.05  # Gratis Ongkir XTRA 추가 공제율

# 수수료율 학습 시 스냅할 표준 요율
SNAP_RATES = (0.095, 0.0825)
SNAP_TOLERANCE = 0.005

# 헤더 탐지 시 스캔할 최대 행 수
HEADER_SCAN_ROWS = 30
# 헤더 탐지 실패 시 오류 메시지에 넣을 샘플 행 수
HEADER_SAMPLE_ROWS = 5

# 통화 기호 (파싱 시 제거)
CURRENCY_SYMBOL = "Rp"

# ──── 주문 상태 키워드 (우선순위 순서 유지 필수) ────
# 부분 문자열이 겹치므로 위에서부터 먼저 매칭된 상태가 선택됨
STATUS_KEYWORDS = [
    ("Completed", ("selesai", "completed")),
    ("Delivered", ("dikirim", "delivered", "shipping")),
    ("Paid", ("paid", "sudah bayar", "bayar")),
    ("Cancelled", ("batal", "cancelled", "dibatalkan")),
    ("Failed", ("gagal", "failed")),
    ("InProgress", ("perlu dikirim", "to ship", "processed")),
]

# ──── 주문표 컬럼 별칭 (앞쪽이 우선) ────
ORDER_COLUMN_ALIASES = {
    "order_id": ["No. Pesanan", "Order ID", "Order No."],
    "sku": [
        "Nomor Referensi SKU", "SKU Reference No.", "SKU Number",
        "Parent SKU", "Variation SKU",
    ],
    "product_price": ["Total Harga Produk", "Merchandise Subtotal", "Product Price"],
    "quantity": ["Jumlah", "Quantity"],
    "status": ["Status Pesanan", "Order Status"],
    "shipping_subsidy": ["Subsidi Pengiriman dari Shopee", "Shipping Fee Rebate from Shopee"],
    "logistic_fee": ["Ongkos Kirim yang Dibayar oleh Pembeli", "Shipping Fee Paid by Buyer"],
    "commission_fee": ["Biaya Komisi", "Commission Fee"],
    "service_fee": ["Biaya Layanan", "Service Fee"],
    "estimated_income": [
        "Total Penghasilan", "Estimated Order Income",
        "Estimated Income", "Penghasilan Pesanan",
    ],
}

# ──── 원가표 / 광고표 헤더 패턴 ────
COST_SKU_PATTERNS = ["sku", "item code", "nomor referensi", "商品代码"]
COST_PRICE_PATTERNS = ["cost", "成本", "price", "rmb", "rnb"]
COST_MULTIPLIER_PATTERNS = ["unit", "multiplier", "倍数", "数量", "jumlah"]

# 광고비: 정확히 일치해야 하는 토큰 / 포함만 되면 되는 토큰
ADS_SPEND_EXACT = ["expense", "spend", "cost"]
ADS_SPEND_PATTERNS = ["total spend", "ad spend", "biaya"]
