"""
Main API router that includes all endpoint routers
"""

from fastapi import APIRouter

from xeno_api.api.endpoints import (
    analytics,
    auth,
    campaigns,
    customers,
    dashboard,
    health,
    journeys,
    orders,
    segments,
    shopify,
)

# Create main API router
api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(auth.router, prefix="/auth", tags=["authentication"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
api_router.include_router(campaigns.router, prefix="/campaigns", tags=["campaigns"])
api_router.include_router(customers.router, prefix="/customers", tags=["customers"])
api_router.include_router(segments.router, prefix="/segments", tags=["segments"])
api_router.include_router(orders.router, prefix="/orders", tags=["orders"])
api_router.include_router(journeys.router, prefix="/journeys", tags=["journeys"])
api_router.include_router(analytics.router, prefix="/analytics", tags=["analytics"])
api_router.include_router(shopify.router, prefix="/shopify", tags=["shopify"])
api_router.include_router(health.router, tags=["health"])
