"""Authoritative in-memory store with an optional persistence boundary."""

import logging
from dataclasses import dataclass, field
from typing import Protocol

from nutrition_ledger.domain.state import LedgerState

_logger = logging.getLogger(__name__)


class StateRepository(Protocol):
    """Persistence interface for the whole ledger state."""

    def load(self, namespace: str) -> LedgerState | None:
        """Return the stored state for a namespace, if any."""

    def save(self, namespace: str, state: LedgerState) -> None:
        """Persist the whole state under a namespace."""


@dataclass
class NutritionStore:
    """Holds the current ledger state and funnels every write through commit."""

    namespace: str = "nutrition-storage"
    repository: StateRepository | None = None
    state: LedgerState = field(default_factory=LedgerState.initial)

    @classmethod
    def open(
        cls, namespace: str, repository: StateRepository | None = None
    ) -> "NutritionStore":
        """Load the namespace from the repository or start a fresh store."""
        loaded = repository.load(namespace) if repository else None
        if loaded is None:
            _logger.info("Starting new nutrition store: namespace=%s", namespace)
            return cls(namespace=namespace, repository=repository)
        return cls(namespace=namespace, repository=repository, state=loaded)

    def commit(self, state: LedgerState) -> LedgerState:
        """Persist the state, then make it current.

        A failed save leaves the previous state in place.
        """
        if self.repository is not None:
            self.repository.save(self.namespace, state)
        self.state = state
        return state
