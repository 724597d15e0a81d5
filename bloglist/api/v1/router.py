"""
API v1 router - aggregates all endpoint modules (RESTful structure).
"""

from fastapi import APIRouter

from bloglist.api.v1.endpoints import blogs, health

api_router = APIRouter(prefix="/v1")

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(blogs.router, prefix="/blogs", tags=["blogs"])
