"""
Central configuration for SupplierScan.

All paths, thresholds, scoring weights, and lookup tables defined here.
"""
import os
from pathlib import Path

# Paths (absolute)
BASE_DIR = Path(__file__).parent.absolute()
LOGS_DIR = Path(os.getenv("SUPPLIERSCAN_LOGS_DIR", BASE_DIR / "logs"))

# Create directories if they don't exist
LOGS_DIR.mkdir(parents=True, exist_ok=True)

# FastAPI
API_HOST = os.getenv("SUPPLIERSCAN_HOST", "0.0.0.0")
API_PORT = int(os.getenv("SUPPLIERSCAN_PORT", "8000"))
API_VERSION = "1.0.0"

# Platform detection: lower-cased URL substring -> platform (first match wins)
PLATFORM_PATTERNS = [
    ("aliexpress", "ALIEXPRESS"),
    ("alibaba", "ALIBABA"),
    ("1688.com", "1688"),
    ("cjdropshipping", "CJ_DROPSHIPPING"),
    ("taobao", "TAOBAO"),
]

PLATFORM_DISPLAY_NAMES = {
    "ALIEXPRESS": "AliExpress",
    "ALIBABA": "Alibaba",
    "1688": "1688",
    "CJ_DROPSHIPPING": "CJ Dropshipping",
    "TAOBAO": "Taobao",
    "OTHER": "Mixed",
}

# Mock metrics (placeholder until a real data source is wired in)
DEFAULT_SHIPPING_DAYS = 16
PLATFORM_SHIPPING_DAYS = {
    "ALIEXPRESS": 12,
    "ALIBABA": 18,
    "CJ_DROPSHIPPING": 10,
}

BASELINE_METRICS = {
    "on_time_delivery_rate": 0.88,
    "refund_rate": 0.04,
    "dispute_rate": 0.02,
    "defect_rate": 0.03,
    "review_authenticity_score": 0.75,
    "response_time_hours": 8,
    "out_of_stock_frequency": 0.07,
    "price_volatility_score": 0.25,
    "trend_score": 0.1,
    "order_volume": 1200,
}

# Category starting points before any metric is applied
CATEGORY_BASELINES = {
    "shipping": 70,
    "quality": 75,
    "communication": 80,
    "stability": 80,
}

# Category weights for the overall score (must sum to 1.0)
CATEGORY_WEIGHTS = {
    "shipping": 0.35,
    "quality": 0.35,
    "communication": 0.15,
    "stability": 0.15,
}

# Warning thresholds
WARNING_THRESHOLDS = {
    "shipping_days": 20,
    "on_time_rate": 0.8,
    "defect_rate": 0.05,
    "refund_rate": 0.08,
    "dispute_rate": 0.05,
    "review_authenticity": 0.6,
    "response_hours": 24,
    "out_of_stock": 0.1,
    "price_volatility": 0.4,
    "trend_worsening": -0.3,
    "trend_improving": 0.3,
    "order_volume": 50,
}

TREND_PENALTY = 10
TREND_BONUS = 5

WARNING_MESSAGES = {
    "long_shipping": "Long average shipping time to US.",
    "late_delivery": "Low on-time delivery rate.",
    "defects": "High defect/damage rate.",
    "refunds_disputes": "Refund/dispute rates are above normal.",
    "reviews": "Reviews may be low quality or manipulated.",
    "slow_response": "Slow response time to messages.",
    "stock": "Stock levels are unstable.",
    "pricing": "Pricing is volatile.",
    "trend": "Performance trend worsening in recent period.",
    "low_volume": "Low order volume – limited historical data.",
}

# Risk bands on the overall score, evaluated high to low
RISK_BANDS = [
    (85, "EXCELLENT"),
    (70, "GOOD"),
    (55, "OKAY"),
    (40, "RISKY"),
]
RISK_FLOOR_LABEL = "AVOID"

# Labels that count as a high-risk scan for event logging
HIGH_RISK_LABELS = {"RISKY", "AVOID"}

# Summary remarks
SUMMARY_STRONG_THRESHOLD = 80
SUMMARY_WEAK_THRESHOLD = 60
SUMMARY_MAX_RISKS = 3

# Scan history (per user, newest first)
HISTORY_LIMIT = 5

# Mock alternatives offered alongside every scan
ALTERNATIVE_TEMPLATES = [
    {
        "suffix": "Supplier A",
        "trust_score": 90,
        "note": "High volume, stable shipping, low dispute rate.",
    },
    {
        "suffix": "Supplier B",
        "trust_score": 84,
        "note": "Good performance with slightly slower shipping.",
    },
]

# Static marketplace catalog
MARKETPLACE_CATALOG = [
    {
        "name": "Shenzhen Bright Electronics",
        "platform": "ALIEXPRESS",
        "category": "Electronics",
        "trust_score": 91,
        "note": "Fast ePacket shipping, consistent stock on phone accessories.",
    },
    {
        "name": "Yiwu Home Essentials",
        "platform": "ALIBABA",
        "category": "Home & Kitchen",
        "trust_score": 86,
        "note": "Bulk pricing on kitchenware, responsive sales team.",
    },
    {
        "name": "Guangzhou Apparel Works",
        "platform": "1688",
        "category": "Apparel",
        "trust_score": 78,
        "note": "Low unit cost, longer lead times during peak season.",
    },
    {
        "name": "CJ Warehouse US-East",
        "platform": "CJ_DROPSHIPPING",
        "category": "General Merchandise",
        "trust_score": 88,
        "note": "US warehouse stock, 3-7 day delivery.",
    },
    {
        "name": "Hangzhou Pet Supplies",
        "platform": "TAOBAO",
        "category": "Pet Supplies",
        "trust_score": 72,
        "note": "Wide catalog, occasional listing price swings.",
    },
    {
        "name": "Ningbo Outdoor Gear",
        "platform": "ALIBABA",
        "category": "Sports & Outdoors",
        "trust_score": 81,
        "note": "Certified factory, samples available.",
    },
    {
        "name": "Dongguan Beauty Lab",
        "platform": "ALIEXPRESS",
        "category": "Beauty",
        "trust_score": 64,
        "note": "Popular cosmetics tools, mixed review authenticity.",
    },
    {
        "name": "Independent Craft Collective",
        "platform": "OTHER",
        "category": "Handmade",
        "trust_score": 69,
        "note": "Small batch goods, limited order history.",
    },
]
MARKETPLACE_DEFAULT_LIMIT = 10

# Event ID definitions (Windows Event Viewer style)
EVENT_IDS = {
    # Scan events (1001-1999)
    1001: "Supplier scan completed",
    1002: "High-risk supplier scanned",
    1003: "Supplier scan failed",

    # History events (2001-2999)
    2001: "Scan history cleared",

    # Marketplace events (3001-3999)
    3001: "Marketplace search executed",

    # System events (4001-4999)
    4001: "SupplierScan service started",
}

# Logging settings
EVENT_LOG_FILE = LOGS_DIR / "events.jsonl"
