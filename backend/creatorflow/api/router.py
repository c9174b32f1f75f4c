"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from creatorflow.api.routes import (
    auth, users, influencers, transactions, deliveries,
    projects, categories, tasks, dashboard, feed
)

api_router = APIRouter()

# Include all route modules
api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(influencers.router)
api_router.include_router(transactions.router)
api_router.include_router(deliveries.router)
api_router.include_router(projects.router)
api_router.include_router(categories.router)
api_router.include_router(tasks.router)
api_router.include_router(dashboard.router)
api_router.include_router(feed.router)
