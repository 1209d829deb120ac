"""FastAPI dependencies for the application-scoped cache and event publisher.

Both are created once in `create_app` and kept on `app.state`.
"""


from fastapi import Request

from catalog.core.caching import CacheManager
from catalog.core.events import EventPublisher


def get_cache(request: Request) -> CacheManager:
    return request.app.state.cache


def get_events(request: Request) -> EventPublisher:
    return request.app.state.events
