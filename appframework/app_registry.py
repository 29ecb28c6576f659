import json
import logging
from typing import List, Optional

from .config import APP_CATALOG_PATH
from .models import AppDescriptor, Extension

logger = logging.getLogger(__name__)


class AppRegistry:
    """Catalog of app descriptors and extensions loaded from a JSON file."""

    def __init__(self, path: str = APP_CATALOG_PATH):
        self.path = path
        self._load()

    def _load(self):
        try:
            with open(self.path, "r") as f:
                catalog = json.load(f)
        except FileNotFoundError:
            catalog = {}

        self.apps = [AppDescriptor(**entry) for entry in catalog.get("apps", [])]
        self.extensions = [
            Extension(**entry) for entry in catalog.get("extensions", [])
        ]
        logger.info(
            f"Loaded {len(self.apps)} apps and {len(self.extensions)} extensions "
            f"from '{self.path}'"
        )

    def reload(self):
        self._load()

    def get_apps(self) -> List[AppDescriptor]:
        return list(self.apps)

    def get_extensions(self) -> List[Extension]:
        return list(self.extensions)

    def find_app(self, app_id: str) -> Optional[AppDescriptor]:
        return next((a for a in self.apps if a.id == app_id), None)

    def find_extension(self, extension_id: str) -> Optional[Extension]:
        return next((e for e in self.extensions if e.id == extension_id), None)
