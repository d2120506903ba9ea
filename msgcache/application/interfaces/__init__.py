"""Application interfaces (ports): catalog, message store and observer protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from msgcache.infrastructure.
"""

from msgcache.application.interfaces.services import (
    ICatalogProvider,
    IMessageStore,
    ISkippedMessageObserver,
)

__all__ = [
    "ICatalogProvider",
    "IMessageStore",
    "ISkippedMessageObserver",
]
