"""
Pydantic data models for SupplierScan.

Defines all core data structures: Supplier Metrics, Scoring Results, Scan History,
Marketplace Listings, and Events.

Wire format uses the camelCase names the web client expects (avgShippingDaysUS,
riskLabel, trustScore); Python code uses the snake_case field names.
"""
from pydantic import BaseModel, Field
from typing import Optional, Dict, Any, List, Tuple
from datetime import datetime
from enum import Enum


class WireModel(BaseModel):
    """Base model accepting both field names and camelCase aliases."""

    class Config:
        populate_by_name = True


# ==================== Event System ====================

class EventLevel(str, Enum):
    """Windows Event Viewer style event levels"""
    INFORMATION = "Information"
    WARNING = "Warning"
    ERROR = "Error"
    CRITICAL = "Critical"


class EventCategory(str, Enum):
    """Event category taxonomy"""
    SCAN = "Scan"
    HISTORY = "History"
    MARKETPLACE = "Marketplace"
    SYSTEM = "System"


class Event(BaseModel):
    """
    Windows Event Viewer style event.

    One JSON object per line in the event log.
    """
    event_id: int  # 1001 to 4999, see config.EVENT_IDS
    timestamp: datetime = Field(default_factory=datetime.utcnow)
    level: EventLevel
    category: EventCategory
    message: str
    details: Dict[str, Any] = Field(default_factory=dict)
    user_id: Optional[str] = None

    def to_jsonl(self) -> str:
        """Serialize to JSONL format for logging"""
        return self.model_dump_json()


# ==================== Platforms & Metrics ====================

class Platform(str, Enum):
    """Marketplace identity inferred from a supplier URL"""
    ALIEXPRESS = "ALIEXPRESS"
    ALIBABA = "ALIBABA"
    CN_1688 = "1688"
    CJ_DROPSHIPPING = "CJ_DROPSHIPPING"
    TAOBAO = "TAOBAO"
    OTHER = "OTHER"


class SupplierMetrics(WireModel):
    """
    Operational metrics for one supplier.

    Every field is optional. A data source may return any subset and the
    scoring engine falls back to category baselines for what is missing.
    """
    avg_shipping_days_us: Optional[float] = Field(
        default=None, ge=0, alias="avgShippingDaysUS",
        description="Average delivery time to the US in days"
    )
    on_time_delivery_rate: Optional[float] = Field(
        default=None, ge=0.0, le=1.0, alias="onTimeDeliveryRate",
        description="Fraction of on-time deliveries"
    )
    refund_rate: Optional[float] = Field(
        default=None, ge=0.0, le=1.0, alias="refundRate",
        description="Fraction of orders refunded"
    )
    dispute_rate: Optional[float] = Field(
        default=None, ge=0.0, le=1.0, alias="disputeRate",
        description="Fraction of orders disputed"
    )
    defect_rate: Optional[float] = Field(
        default=None, ge=0.0, le=1.0, alias="defectRate",
        description="Fraction of defective or damaged items"
    )
    review_authenticity_score: Optional[float] = Field(
        default=None, ge=0.0, le=1.0, alias="reviewAuthenticityScore",
        description="Estimated genuineness of reviews"
    )
    response_time_hours: Optional[float] = Field(
        default=None, ge=0, alias="responseTimeHours",
        description="Average message response latency in hours"
    )
    out_of_stock_frequency: Optional[float] = Field(
        default=None, ge=0.0, le=1.0, alias="outOfStockFrequency",
        description="Fraction of time items are unavailable"
    )
    price_volatility_score: Optional[float] = Field(
        default=None, ge=0.0, le=1.0, alias="priceVolatilityScore",
        description="Price instability indicator"
    )
    trend_score: Optional[float] = Field(
        default=None, ge=-1.0, le=1.0, alias="trendScore",
        description="Recent performance trend, negative means declining"
    )
    order_volume: Optional[int] = Field(
        default=None, ge=0, alias="orderVolume",
        description="Historical order count"
    )


# ==================== Trust Scoring ====================

class RiskLabel(str, Enum):
    """Qualitative band of the overall trust score, best to worst"""
    EXCELLENT = "EXCELLENT"
    GOOD = "GOOD"
    OKAY = "OKAY"
    RISKY = "RISKY"
    AVOID = "AVOID"


class ScoringResult(WireModel):
    """
    Output of the trust score engine.

    Category scores and overall are integers between 0 and 100.
    Warnings keep the order in which the checks fired.
    """
    overall: int = Field(ge=0, le=100)
    shipping: int = Field(ge=0, le=100)
    quality: int = Field(ge=0, le=100)
    communication: int = Field(ge=0, le=100)
    stability: int = Field(ge=0, le=100)
    risk_label: RiskLabel = Field(alias="riskLabel")
    warnings: Tuple[str, ...] = ()
    summary: str

    class Config:
        populate_by_name = True
        frozen = True


class Alternative(WireModel):
    """Suggested alternative supplier on the same platform"""
    name: str
    platform: Platform
    trust_score: int = Field(ge=0, le=100, alias="trustScore")
    note: str


# ==================== Scan History ====================

class HistoryEntry(WireModel):
    """One past scan, as shown in the recent scans list"""
    url: str
    platform: Platform
    overall: int = Field(ge=0, le=100)
    risk_label: RiskLabel = Field(alias="riskLabel")
    timestamp: datetime = Field(default_factory=datetime.utcnow)


# ==================== Marketplace ====================

class MarketplaceListing(WireModel):
    """Supplier entry in the static marketplace catalog"""
    name: str
    platform: Platform
    category: str
    trust_score: int = Field(ge=0, le=100, alias="trustScore")
    note: str = ""


# ==================== API Request/Response Models ====================

class ScanRequest(BaseModel):
    """
    API request model for a supplier scan.

    url is left untyped so the route can answer a bad value with 400
    instead of a validation error.
    """
    url: Any = None
    user_id: str = "demo-user"


class ScanResponse(WireModel):
    """API response model for a supplier scan"""
    ok: bool = True
    url: str
    platform: Platform
    scoring: ScoringResult
    alternatives: List[Alternative]


class PlatformInfo(WireModel):
    """Known platform and its display name"""
    platform: Platform
    display_name: str = Field(alias="displayName")


class SystemStatus(BaseModel):
    """API response model for system health check"""
    status: str
    version: str
    known_platforms: int
    history_entries: int
    event_count: int
