"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from tripsplit.api.routes import (
    trips, history, friends, categories, expenses, settlements
)

api_router = APIRouter()

# Include all route modules
api_router.include_router(trips.router)
api_router.include_router(history.router)
api_router.include_router(friends.router)
api_router.include_router(categories.router)
api_router.include_router(expenses.router)
api_router.include_router(settlements.router)
