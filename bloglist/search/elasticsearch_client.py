"""
Elasticsearch client - executes post searches against the full-text index.
Challenge: Raw Lucene queries, named alternate indexes, totals for pagination.
The index itself is built and maintained elsewhere; this module only reads.
"""

import logging
from typing import Any
from urllib.parse import urlparse

from elasticsearch import AsyncElasticsearch

from bloglist.config import get_settings
from bloglist.core.interfaces import SearchCriteria, SearchResult, UnknownSearchProviderError
from bloglist.schemas.listing import PostSummary

logger = logging.getLogger(__name__)

settings = get_settings()

_es_client: AsyncElasticsearch | None = None


def _es_client_options() -> dict:
    """Build Elasticsearch client options from settings (supports HTTPS + basic auth in URL)."""
    url = settings.elasticsearch_url
    basic_auth = None
    parsed = urlparse(url)
    if parsed.username and parsed.password:
        basic_auth = (parsed.username, parsed.password)
        # Credentials go to the client separately, not in the host URL
        netloc = parsed.hostname or ""
        if parsed.port:
            netloc += f":{parsed.port}"
        url = f"{parsed.scheme}://{netloc}"
    opts: dict[str, Any] = {
        "hosts": [url],
        "verify_certs": settings.elasticsearch_verify_certs,
        "request_timeout": settings.elasticsearch_request_timeout,
    }
    if basic_auth:
        opts["basic_auth"] = basic_auth
    return opts


async def get_elasticsearch() -> AsyncElasticsearch:
    """Shared Elasticsearch client (created lazily)."""
    global _es_client
    if _es_client is None:
        _es_client = AsyncElasticsearch(**_es_client_options())
    return _es_client


async def close_elasticsearch() -> None:
    global _es_client
    if _es_client is not None:
        await _es_client.close()
        _es_client = None


def hit_to_summary(source: dict[str, Any]) -> PostSummary:
    """Map an index document to a listing entry. Missing list fields become empty."""
    return PostSummary(
        id=int(source["id"]),
        title=source.get("title") or "",
        url_name=source.get("url_name") or "",
        excerpt=source.get("excerpt"),
        published_at=source.get("published_at"),
        tags=source.get("tags") or [],
        categories=source.get("categories") or [],
    )


class ElasticsearchSearchBackend:
    """SearchBackend over Elasticsearch. Providers are names for alternate indexes."""

    def __init__(self, client: AsyncElasticsearch, default_index: str, providers: dict[str, str] | None = None):
        self.client = client
        self.default_index = default_index
        self.providers = providers or {}

    def create_criteria(self, provider: str | None = None) -> SearchCriteria:
        if provider is None:
            return SearchCriteria(index=self.default_index)
        try:
            index = self.providers[provider]
        except KeyError:
            raise UnknownSearchProviderError(provider) from None
        return SearchCriteria(index=index, provider=provider)

    async def execute(self, criteria: SearchCriteria, skip: int = 0, limit: int = 10) -> SearchResult:
        """Run the raw query for one window. Errors from Elasticsearch propagate."""
        if criteria.query is None:
            raise ValueError("criteria has no query; call raw_query() first")
        response = await self.client.search(
            index=criteria.index,
            query={"query_string": {"query": criteria.query}},
            from_=skip,
            size=limit,
            track_total_hits=True,
        )
        # Response may be ObjectApiResponse; support both .body and dict access
        body = getattr(response, "body", response)
        hits = body["hits"]["hits"]
        total = body["hits"].get("total")
        total_val = total.get("value", len(hits)) if isinstance(total, dict) else (total or len(hits))
        if total_val == 0:
            logger.info("search on index=%s returned 0 hits", criteria.index)
        return SearchResult(total=total_val, posts=[hit_to_summary(hit["_source"]) for hit in hits])
