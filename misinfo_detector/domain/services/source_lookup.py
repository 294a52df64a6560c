"""Guarded access to the search provider."""

import logging
from typing import List

from ..ports.search_provider import SearchProvider

logger = logging.getLogger(__name__)


async def lookup_sources(search: SearchProvider, query: str, max_results: int) -> List[str]:
    """Search for sources, treating any provider failure as "no results".

    Search is advisory for the pipeline, so this never raises.
    """
    try:
        results = await search.search(query, max_results)
    except Exception as e:
        logger.warning(f"⚠️ Search failed for '{query[:60]}': {type(e).__name__}: {e}")
        return []

    sources: List[str] = []
    for result in results or []:
        if result and result not in sources:
            sources.append(result)
        if len(sources) >= max_results:
            break
    return sources
