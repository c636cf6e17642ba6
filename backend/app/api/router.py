"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from app.api.routes import auth, users, budget, goals, expenses, stats

api_router = APIRouter()

# Include all route modules
api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(budget.router)
api_router.include_router(goals.router)
api_router.include_router(expenses.router)
api_router.include_router(stats.router)
