"""JSON file storage for the ledger state, one file per namespace."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from nutrition_ledger.adapters.state_codec import state_from_dict, state_to_dict
from nutrition_ledger.domain.state import LedgerState
from nutrition_ledger.services.store import StateRepository

_logger = logging.getLogger(__name__)


@dataclass
class JsonFileStateRepository(StateRepository):
    """Stores each namespace as ``<data_dir>/<namespace>.json``."""

    data_dir: Path

    def load(self, namespace: str) -> LedgerState | None:
        """Return the stored state, or None when the file does not exist."""
        path = self._path(namespace)
        if not path.exists():
            return None
        payload = json.loads(path.read_text(encoding="utf-8"))
        _logger.info("Loaded ledger state: path=%s", path)
        return state_from_dict(payload)

    def save(self, namespace: str, state: LedgerState) -> None:
        """Write the whole state, replacing the previous file atomically."""
        path = self._path(namespace)
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_suffix(".json.tmp")
        tmp.write_text(
            json.dumps(state_to_dict(state), ensure_ascii=False, indent=2),
            encoding="utf-8",
        )
        tmp.replace(path)

    def _path(self, namespace: str) -> Path:
        return self.data_dir / f"{namespace}.json"
