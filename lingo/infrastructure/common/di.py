import threading
from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from lingo.core import container
from lingo.database import DatabaseSession

T = TypeVar("T")

# Sync dependencies run in a threadpool and container.db is shared, so the
# override, the build and the reset must not interleave between requests.
_container_lock = threading.Lock()


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Create a FastAPI dependency for a container provider.

    The container's db dependency is overridden with the request-scoped session
    while the use case and its repositories are built. The built graph keeps its
    own references to that session, so only construction is serialized.
    """

    def dependency(db: DatabaseSession) -> T:
        with _container_lock:
            container.db.override(db)
            try:
                return provider()
            finally:
                container.db.reset_override()

    return dependency
