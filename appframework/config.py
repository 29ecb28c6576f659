import os
from typing import Final

# Configuration constants
APP_CATALOG_PATH: Final[str] = os.getenv("APP_CATALOG_PATH", "app_catalog.json")
COMPONENT_STATE_PATH: Final[str] = os.getenv(
    "COMPONENT_STATE_PATH", "component_state.json"
)
PRINCIPAL_DIRECTORY_PATH: Final[str] = os.getenv(
    "PRINCIPAL_DIRECTORY_PATH", "principals.json"
)
PRINCIPAL_HEADER: Final[str] = os.getenv("PRINCIPAL_HEADER", "X-Username")
MANAGE_COMPONENTS_PRIVILEGE: Final[str] = os.getenv(
    "MANAGE_COMPONENTS_PRIVILEGE", "Manage Apps"
)

# Validate configuration
for _name, _value in (
    ("APP_CATALOG_PATH", APP_CATALOG_PATH),
    ("COMPONENT_STATE_PATH", COMPONENT_STATE_PATH),
    ("PRINCIPAL_DIRECTORY_PATH", PRINCIPAL_DIRECTORY_PATH),
    ("PRINCIPAL_HEADER", PRINCIPAL_HEADER),
    ("MANAGE_COMPONENTS_PRIVILEGE", MANAGE_COMPONENTS_PRIVILEGE),
):
    if not _value.strip():
        raise ValueError(f"{_name} must not be empty")
