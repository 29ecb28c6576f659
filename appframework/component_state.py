import json
import logging
import os
import tempfile
import threading
from typing import Dict, List, Optional, Tuple

from .config import COMPONENT_STATE_PATH
from .models import ComponentState, ComponentType

logger = logging.getLogger(__name__)


class ComponentStateStore:
    """Enabled/disabled overrides keyed by (component id, component type).

    A component without a record is enabled. Upserts may come from several
    request threads at once; they are serialized and the file is replaced
    atomically so readers never see a partial write.
    """

    def __init__(self, path: str = COMPONENT_STATE_PATH):
        self.path = path
        self._lock = threading.Lock()
        self._load()

    def _load(self):
        try:
            with open(self.path, "r") as f:
                records = [ComponentState(**entry) for entry in json.load(f)]
        except FileNotFoundError:
            records = []
        self.states: Dict[Tuple[str, ComponentType], ComponentState] = {
            (s.component_id, s.component_type): s for s in records
        }

    def save(self):
        with self._lock:
            self._save()

    def _save(self):
        directory = os.path.dirname(os.path.abspath(self.path))
        fd, tmp_path = tempfile.mkstemp(
            dir=directory, prefix=".component_state.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w") as f:
                json.dump(
                    [state.model_dump(mode="json") for state in self.states.values()],
                    f,
                    indent=2,
                )
            os.replace(tmp_path, self.path)
        except BaseException:
            os.unlink(tmp_path)
            raise

    def get_all(self) -> List[ComponentState]:
        with self._lock:
            return list(self.states.values())

    def get_state(
        self, component_id: str, component_type: ComponentType
    ) -> Optional[ComponentState]:
        return self.states.get((component_id, component_type))

    def set_state(self, component_id: str, component_type: ComponentType, enabled: bool):
        key = (component_id, component_type)
        with self._lock:
            current = self.states.get(key)
            if current is not None and current.enabled == enabled:
                return
            self.states[key] = ComponentState(
                component_id=component_id, component_type=component_type, enabled=enabled
            )
            self._save()
        logger.info(
            f"{component_type.value} '{component_id}' "
            f"{'enabled' if enabled else 'disabled'}"
        )
