"""
Health checks - for load balancers, Kubernetes, and monitoring.
Challenge: Fast liveness; readiness reports the content store and the index.
"""

from typing import Annotated

from elasticsearch import AsyncElasticsearch
from fastapi import APIRouter, Depends
from sqlalchemy import text

from bloglist.config import get_settings
from bloglist.db.session import DbSession
from bloglist.search.elasticsearch_client import get_elasticsearch

router = APIRouter()
settings = get_settings()


@router.get("")
async def health():
    """Liveness: is the process up?"""
    return {"status": "ok", "app": settings.app_name}


@router.get("/ready")
async def ready(session: DbSession, es: Annotated[AsyncElasticsearch, Depends(get_elasticsearch)]):
    """Readiness: the content store must answer; an unreachable index only degrades search."""
    await session.execute(text("SELECT 1"))
    return {"status": "ready", "index": bool(await es.ping())}
