"""
Mock alternative suppliers shown next to a scan result.
"""
from typing import List
from engine.schemas import Alternative, Platform
from engine.scoring.platform_detector import PlatformDetector
import config


def build_alternatives(platform: Platform) -> List[Alternative]:
    """
    Two same-platform suppliers from config.ALTERNATIVE_TEMPLATES.

    Names read "<platform display name> Supplier A/B", "Mixed" for OTHER.
    """
    base = PlatformDetector.display_name(platform)

    return [
        Alternative(
            name=f"{base} {template['suffix']}",
            platform=platform,
            trust_score=template["trust_score"],
            note=template["note"]
        )
        for template in config.ALTERNATIVE_TEMPLATES
    ]
