"""
Trust Score Engine

Four weighted category scores (shipping, quality, communication, stability),
a risk label, ordered warnings, and a plain-language summary from one
SupplierMetrics record. Pure and deterministic: no I/O, no shared state.
"""
import math
from typing import Dict, List, Optional, Sequence, Tuple

from engine.schemas import SupplierMetrics, ScoringResult, RiskLabel
import config


def clamp(value: float, lo: float = 0, hi: float = 100) -> float:
    return max(lo, min(hi, value))


def inverse_ratio_score(ratio: Optional[float]) -> Optional[float]:
    """Bad-when-high ratio (0-1) to a 0-100 score. None when absent."""
    if ratio is None:
        return None
    return clamp(100 - ratio * 100)


def direct_ratio_score(ratio: Optional[float]) -> Optional[float]:
    """Good-when-high ratio (0-1) to a 0-100 score. None when absent."""
    if ratio is None:
        return None
    return clamp(ratio * 100)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive scores (2.5 -> 3, not 2)."""
    return int(math.floor(value + 0.5))


def to_display_score(value: float) -> int:
    """Clamp to 0-100 and round for reporting"""
    return round_half_up(clamp(value))


def risk_label_for(overall: int) -> RiskLabel:
    """
    Map overall score to its risk band.

    Bands from config.RISK_BANDS, checked high to low, first match wins:
    >=85 EXCELLENT, >=70 GOOD, >=55 OKAY, >=40 RISKY, else AVOID.
    """
    for threshold, label in config.RISK_BANDS:
        if overall >= threshold:
            return RiskLabel(label)
    return RiskLabel(config.RISK_FLOOR_LABEL)


class TrustScoreEngine:
    """
    Multi-factor supplier trust scoring.

    Each category starts from its baseline (config.CATEGORY_BASELINES) and is
    revised by successive blends, one per metric that is present. Blend order
    inside a category is significant.

    Weights from config.CATEGORY_WEIGHTS:
    - shipping: 0.35
    - quality: 0.35
    - communication: 0.15
    - stability: 0.15
    """

    def __init__(
        self,
        weights: Dict[str, float] = None,
        baselines: Dict[str, float] = None,
        thresholds: Dict[str, float] = None
    ):
        self.weights = weights or config.CATEGORY_WEIGHTS
        self.baselines = baselines or config.CATEGORY_BASELINES
        self.thresholds = thresholds or config.WARNING_THRESHOLDS
        self.messages = config.WARNING_MESSAGES

    def score(self, metrics: SupplierMetrics) -> ScoringResult:
        """
        Score a supplier.

        Args:
            metrics: Supplier metrics, any field may be None

        Returns:
            ScoringResult with category scores, overall, risk label,
            warnings and summary
        """
        shipping, shipping_warnings = self.score_shipping(metrics)
        quality, quality_warnings = self.score_quality(metrics)
        communication, communication_warnings = self.score_communication(metrics)
        stability, stability_warnings = self.score_stability(metrics)

        warnings = tuple(
            shipping_warnings +
            quality_warnings +
            communication_warnings +
            stability_warnings +
            self.check_order_volume(metrics)
        )

        categories = {
            "shipping": to_display_score(shipping),
            "quality": to_display_score(quality),
            "communication": to_display_score(communication),
            "stability": to_display_score(stability),
        }

        overall = self.combine(categories)
        risk_label = risk_label_for(overall)

        return ScoringResult(
            overall=overall,
            risk_label=risk_label,
            warnings=warnings,
            summary=build_summary(overall, warnings=warnings, **categories),
            **categories
        )

    def combine(self, categories: Dict[str, int]) -> int:
        """Weighted blend of category scores, clamped and rounded"""
        overall_raw = sum(
            categories[name] * weight for name, weight in self.weights.items()
        )
        return to_display_score(overall_raw)

    # ==================== Categories ====================

    def score_shipping(self, metrics: SupplierMetrics) -> Tuple[float, List[str]]:
        warnings = []
        score = self.baselines["shipping"]

        days = metrics.avg_shipping_days_us
        if days is not None:
            score = clamp(120 - days * 4, 40, 100)
            if days > self.thresholds["shipping_days"]:
                warnings.append(self.messages["long_shipping"])

        on_time = metrics.on_time_delivery_rate
        if on_time is not None:
            score = score * 0.6 + direct_ratio_score(on_time) * 0.4
            if on_time < self.thresholds["on_time_rate"]:
                warnings.append(self.messages["late_delivery"])

        return score, warnings

    def score_quality(self, metrics: SupplierMetrics) -> Tuple[float, List[str]]:
        warnings = []
        score = self.baselines["quality"]

        defect = metrics.defect_rate
        if defect is not None:
            score = score * 0.5 + inverse_ratio_score(defect) * 0.5
            if defect > self.thresholds["defect_rate"]:
                warnings.append(self.messages["defects"])

        # A missing refund or dispute rate counts as zero once either is known
        if metrics.refund_rate is not None or metrics.dispute_rate is not None:
            refund = metrics.refund_rate if metrics.refund_rate is not None else 0
            dispute = metrics.dispute_rate if metrics.dispute_rate is not None else 0
            mix = inverse_ratio_score(refund) * 0.5 + inverse_ratio_score(dispute) * 0.5
            score = score * 0.5 + mix * 0.5
            if refund > self.thresholds["refund_rate"] or dispute > self.thresholds["dispute_rate"]:
                warnings.append(self.messages["refunds_disputes"])

        reviews = metrics.review_authenticity_score
        if reviews is not None:
            score = score * 0.7 + direct_ratio_score(reviews) * 0.3
            if reviews < self.thresholds["review_authenticity"]:
                warnings.append(self.messages["reviews"])

        return score, warnings

    def score_communication(self, metrics: SupplierMetrics) -> Tuple[float, List[str]]:
        warnings = []
        score = self.baselines["communication"]

        hours = metrics.response_time_hours
        if hours is not None:
            # Replaces the baseline outright, no blend
            score = clamp(120 - hours * 2.5, 40, 100)
            if hours > self.thresholds["response_hours"]:
                warnings.append(self.messages["slow_response"])

        return score, warnings

    def score_stability(self, metrics: SupplierMetrics) -> Tuple[float, List[str]]:
        warnings = []
        score = self.baselines["stability"]

        out_of_stock = metrics.out_of_stock_frequency
        if out_of_stock is not None:
            score = score * 0.6 + inverse_ratio_score(out_of_stock) * 0.4
            if out_of_stock > self.thresholds["out_of_stock"]:
                warnings.append(self.messages["stock"])

        volatility = metrics.price_volatility_score
        if volatility is not None:
            score = score * 0.6 + inverse_ratio_score(volatility) * 0.4
            if volatility > self.thresholds["price_volatility"]:
                warnings.append(self.messages["pricing"])

        trend = metrics.trend_score
        if trend is not None:
            if trend < self.thresholds["trend_worsening"]:
                score -= config.TREND_PENALTY
                warnings.append(self.messages["trend"])
            elif trend > self.thresholds["trend_improving"]:
                score += config.TREND_BONUS

        return score, warnings

    def check_order_volume(self, metrics: SupplierMetrics) -> List[str]:
        volume = metrics.order_volume if metrics.order_volume is not None else 0
        if volume < self.thresholds["order_volume"]:
            return [self.messages["low_volume"]]
        return []


def build_summary(
    overall: int,
    shipping: int,
    quality: int,
    communication: int,
    stability: int,
    warnings: Sequence[str]
) -> str:
    """
    Compose the plain-language summary.

    Remarks appear only at the extremes (>=80 strong, <=60 weak), and only the
    first config.SUMMARY_MAX_RISKS warnings are listed.
    """
    strong = config.SUMMARY_STRONG_THRESHOLD
    weak = config.SUMMARY_WEAK_THRESHOLD

    parts = [f"Overall trust score is {overall}/100."]

    if shipping >= strong:
        parts.append("Shipping performance is strong.")
    elif shipping <= weak:
        parts.append("Shipping performance is below average.")

    if quality >= strong:
        parts.append("Quality metrics are solid.")
    elif quality <= weak:
        parts.append("Quality metrics indicate possible issues.")

    if communication <= weak:
        parts.append("Supplier may be slow to respond to messages.")
    if stability <= weak:
        parts.append("Stock or pricing stability is a concern.")

    if warnings:
        parts.append("Key risks: " + "; ".join(warnings[:config.SUMMARY_MAX_RISKS]) + ".")

    return " ".join(parts)


# Global instance
trust_score_engine = TrustScoreEngine()


def compute_trust_score(metrics: SupplierMetrics) -> ScoringResult:
    """Score metrics with the default engine"""
    return trust_score_engine.score(metrics)
