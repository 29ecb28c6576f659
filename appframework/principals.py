"""
Privilege lookups and request principals.

The directory is read from a JSON file shaped like::

    {
        "privileges": [{"name": "manage", "description": "..."}],
        "users": [{"username": "admin", "unrestricted": true, "privileges": []}]
    }

Privileges may also be listed as bare names.
"""

import json
import logging
from typing import Dict, Optional, Protocol

from .config import PRINCIPAL_DIRECTORY_PATH
from .models import Principal, Privilege

logger = logging.getLogger(__name__)


def _is_blank_name(name: Optional[str]) -> bool:
    return name is None or not name.strip()


class PrivilegeResolver(Protocol):
    def resolve_privilege(self, name: str) -> Optional[Privilege]: ...


class PrincipalDirectory:
    def __init__(self, path: str = PRINCIPAL_DIRECTORY_PATH):
        self.path = path
        self._load()

    def _load(self):
        try:
            with open(self.path, "r") as f:
                directory = json.load(f)
        except FileNotFoundError:
            directory = {}

        self.privileges: Dict[str, Privilege] = {}
        for entry in directory.get("privileges", []):
            privilege = (
                Privilege(name=entry) if isinstance(entry, str) else Privilege(**entry)
            )
            self.privileges[privilege.name] = privilege

        self.principals: Dict[str, Principal] = {}
        for entry in directory.get("users", []):
            principal = Principal(**entry)
            if _is_blank_name(principal.username):
                logger.warning(f"Skipping user entry without a username in '{self.path}'")
                continue
            self.principals[principal.username] = principal

    def resolve_privilege(self, name: str) -> Optional[Privilege]:
        return self.privileges.get(name)

    def find_principal(self, username: Optional[str]) -> Optional[Principal]:
        """Return the principal known as ``username``, or None for anonymous."""
        if not username:
            return None
        principal = self.principals.get(username)
        if principal is None:
            logger.warning(f"Unknown user '{username}', treating request as anonymous")
        return principal
