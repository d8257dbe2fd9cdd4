#!/usr/bin/env python3
"""
Diagnostic script: trust score breakdown for every known platform.
"""
from engine.schemas import Platform
from engine.scoring.metrics_provider import metrics_provider
from engine.scoring.platform_detector import platform_detector
from engine.scoring.trust_score_engine import trust_score_engine


def diagnose():
    print("=" * 60)
    print("SupplierScan Scoring Diagnostic")
    print("=" * 60)

    for platform in Platform:
        metrics = metrics_provider.get_metrics(platform)
        result = trust_score_engine.score(metrics)

        print(f"\n{platform_detector.display_name(platform)} ({platform.value})")
        print(f"   Shipping days (US): {metrics.avg_shipping_days_us}")
        print(f"   Overall: {result.overall}/100 - {result.risk_label.value}")
        print(
            f"   Shipping {result.shipping} | Quality {result.quality} | "
            f"Communication {result.communication} | Stability {result.stability}"
        )
        if result.warnings:
            for warning in result.warnings:
                print(f"      - {warning}")
        print(f"   Summary: {result.summary}")

    print("\n" + "=" * 60)
    print("Diagnostic Complete")
    print("=" * 60)


if __name__ == "__main__":
    diagnose()
