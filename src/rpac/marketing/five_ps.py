from __future__ import annotations

from dataclasses import dataclass

import pandas as pd


@dataclass(frozen=True)
class CategoryPerformance:
    name: str
    revenue: float
    margin: float  # 0..1
    growth: float  # 0..1


@dataclass(frozen=True)
class PricePosture:
    elasticity: float
    optimal_promotion_depth: float  # 0..1
    margin_impact: float


@dataclass(frozen=True)
class ChannelPerformance:
    channel: str
    revenue_share: float  # 0..1 of total revenue
    conversion: float  # 0..1


@dataclass(frozen=True)
class CampaignROI:
    campaign: str
    roi: float  # multiplier, e.g. 4.2x
    spend: float


@dataclass(frozen=True)
class CustomerSegment:
    segment: str
    revenue_share: float  # 0..1 of total revenue
    customer_share: float  # 0..1 of customers


@dataclass(frozen=True)
class FivePsAnalysis:
    """
    Product / Price / Place / Promotion / People breakdown.
    Static reference figures for the marketing view; not derived from the
    monthly series.
    """

    product: tuple[CategoryPerformance, ...]
    price: PricePosture
    place: tuple[ChannelPerformance, ...]
    promotion: tuple[CampaignROI, ...]
    people: tuple[CustomerSegment, ...]


def five_ps_analysis() -> FivePsAnalysis:
    return FivePsAnalysis(
        product=(
            CategoryPerformance("Handbags", 4_200_000, 0.72, 0.12),
            CategoryPerformance("Accessories", 1_800_000, 0.68, 0.08),
            CategoryPerformance("Footwear", 1_200_000, 0.65, 0.15),
            CategoryPerformance("Apparel", 900_000, 0.58, 0.05),
        ),
        price=PricePosture(
            elasticity=-1.2, optimal_promotion_depth=0.25, margin_impact=-0.15
        ),
        place=(
            ChannelPerformance("Desktop", 0.55, 0.038),
            ChannelPerformance("Mobile", 0.40, 0.028),
            ChannelPerformance("Tablet", 0.05, 0.042),
        ),
        promotion=(
            CampaignROI("Holiday Sale", 4.2, 150_000),
            CampaignROI("New Collection", 3.8, 120_000),
            CampaignROI("Email Campaigns", 6.5, 80_000),
            CampaignROI("Social Media", 2.9, 100_000),
        ),
        people=(
            CustomerSegment("VIP Customers", 0.35, 0.05),
            CustomerSegment("Regular Customers", 0.45, 0.25),
            CustomerSegment("New Customers", 0.20, 0.70),
        ),
    )


def revenue_per_customer(segment: CustomerSegment) -> float:
    # Index per 1,000 customers; floor on the share keeps empty segments finite
    return segment.revenue_share / max(segment.customer_share, 1e-6) * 1000


def campaign_return(campaign: CampaignROI) -> float:
    return campaign.roi * campaign.spend


def segment_frame(analysis: FivePsAnalysis) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "segment": s.segment,
                "revenue_share": s.revenue_share,
                "customer_share": s.customer_share,
                "revenue_per_customer": revenue_per_customer(s),
            }
            for s in analysis.people
        ]
    )


def campaign_frame(analysis: FivePsAnalysis) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "campaign": c.campaign,
                "roi": c.roi,
                "spend": c.spend,
                "return": campaign_return(c),
            }
            for c in analysis.promotion
        ]
    )
