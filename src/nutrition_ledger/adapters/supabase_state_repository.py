"""Supabase storage for the ledger state."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from nutrition_ledger.adapters.state_codec import state_from_dict, state_to_dict
from nutrition_ledger.domain.state import LedgerState
from nutrition_ledger.services.store import StateRepository

TABLE_NAME = "ledger_state"


@dataclass
class SupabaseStateRepository(StateRepository):
    """Supabase-backed repository keeping one JSON row per namespace."""

    client: Client

    def load(self, namespace: str) -> LedgerState | None:
        """Return the stored state for a namespace, if present."""
        response = (
            self.client.table(TABLE_NAME)
            .select("payload")
            .eq("namespace", namespace)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        payload = response.data[0].get("payload")
        if not isinstance(payload, dict):
            return None
        return state_from_dict(payload)

    def save(self, namespace: str, state: LedgerState) -> None:
        """Upsert the whole state for a namespace."""
        response = (
            self.client.table(TABLE_NAME)
            .upsert(
                {
                    "namespace": namespace,
                    "payload": state_to_dict(state),
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                },
                on_conflict="namespace",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save ledger state")
