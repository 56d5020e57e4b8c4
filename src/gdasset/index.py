"""Per-document cache of parse results."""

import logging
import threading

from gdasset.document import AssetDocument
from gdasset.models import DocumentState
from gdasset.scanner import scan

logger = logging.getLogger(__name__)


class DocumentIndex:
    """Parse results keyed by document URI.

    A cached state is reused while the document's version token is unchanged
    and replaced wholesale otherwise. Parses of the same document are
    serialized by a per-document lock; different documents parse
    independently.
    """

    def __init__(self) -> None:
        self._states: dict[str, DocumentState] = {}
        self._locks: dict[str, threading.Lock] = {}
        self._guard = threading.Lock()

    def _lock_for(self, uri: str) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(uri)
            if lock is None:
                lock = self._locks[uri] = threading.Lock()
            return lock

    def parse(self, document: AssetDocument) -> DocumentState:
        """Return the state of ``document``, scanning it if needed."""
        uri = document.uri
        with self._lock_for(uri):
            cached = self._states.get(uri)
            if cached is not None and cached.version == document.version:
                logger.debug("Cache hit for %s (version %s)", uri, document.version)
                return cached
            logger.debug("Scanning %s (version %s)", uri, document.version)
            state = scan(document)
            self._states[uri] = state
            return state

    def get(self, uri: str) -> DocumentState | None:
        """Return the cached state for ``uri`` without scanning."""
        return self._states.get(uri)

    def close(self, uri: str) -> bool:
        """Forget a document.

        Waits for a parse of ``uri`` that is still running, so its result does
        not outlive the close.

        Returns:
            True if a state was cached for ``uri``.
        """
        # Locks are never evicted: one document has one lock for the index's lifetime.
        with self._lock_for(uri):
            removed = self._states.pop(uri, None) is not None
        if removed:
            logger.debug("Closed %s", uri)
        return removed

    def __contains__(self, uri: object) -> bool:
        return uri in self._states

    def __len__(self) -> int:
        return len(self._states)
