"""
Campaign and customer metrics computed from a tenant's own rows.

Every ratio goes through safe_ratio: a zero (or missing) denominator yields 0.
"""

from collections import Counter
from typing import Dict, Iterable, List, Optional, Sequence

from xeno_api.models.customer import LIFECYCLE_STAGES


def safe_ratio(numerator: float, denominator: float) -> float:
    if not denominator:
        return 0.0
    return numerator / denominator


def campaign_roi(campaign, precision: int = 2) -> float:
    """Revenue per unit of spend; 0 when the campaign cost nothing"""
    return round(safe_ratio(campaign.revenue or 0.0, campaign.cost or 0.0), precision)


def campaign_ctr(campaign, precision: int = 1) -> float:
    """Click-through rate in percent of messages sent; 0 when nothing was sent"""
    return round(safe_ratio(campaign.clicked or 0, campaign.sent or 0) * 100, precision)


def total_revenue(campaigns: Iterable) -> float:
    return float(sum(c.revenue or 0.0 for c in campaigns))


def total_cost(campaigns: Iterable) -> float:
    return float(sum(c.cost or 0.0 for c in campaigns))


def average_roi(campaigns: Sequence, precision: int = 2) -> float:
    """Mean of per-campaign ROI, zero-cost campaigns counting as 0"""
    if not campaigns:
        return 0.0
    rois = [safe_ratio(c.revenue or 0.0, c.cost or 0.0) for c in campaigns]
    return round(sum(rois) / len(rois), precision)


def channel_performance(campaigns: Iterable) -> Dict[str, Dict[str, float]]:
    """Revenue, cost and campaign count rolled up per channel"""
    rollup: Dict[str, Dict[str, float]] = {}
    for c in campaigns:
        bucket = rollup.setdefault(c.channel, {"revenue": 0.0, "cost": 0.0, "count": 0})
        bucket["revenue"] += c.revenue or 0.0
        bucket["cost"] += c.cost or 0.0
        bucket["count"] += 1
    return rollup


def top_channel(campaigns: Iterable) -> Optional[str]:
    """Channel with the highest revenue, None without campaigns"""
    rollup = channel_performance(campaigns)
    if not rollup:
        return None
    return max(rollup.items(), key=lambda item: (item[1]["revenue"], item[0]))[0]


def top_campaigns(campaigns: Iterable, limit: int = 5) -> List[dict]:
    ranked = sorted(campaigns, key=lambda c: c.revenue or 0.0, reverse=True)[:limit]
    return [
        {
            "name": c.name,
            "revenue": c.revenue or 0.0,
            "channel": c.channel,
            "roi": campaign_roi(c),
        }
        for c in ranked
    ]


def lifecycle_breakdown(stages: Iterable[str]) -> Dict[str, int]:
    """Count customers per lifecycle stage; every stage is present"""
    counts = Counter(stages)
    return {stage: counts.get(stage, 0) for stage in LIFECYCLE_STAGES}


def repeat_rate(customers: Sequence, precision: int = 1) -> float:
    """Percent of customers with more than one order"""
    repeaters = sum(1 for c in customers if (c.orders_count or 0) > 1)
    return round(safe_ratio(repeaters, len(customers)) * 100, precision)


def engagement_rate(customers: Sequence, precision: int = 1) -> float:
    """Percent of customers engaged with email"""
    engaged = sum(1 for c in customers if c.email_engaged)
    return round(safe_ratio(engaged, len(customers)) * 100, precision)
