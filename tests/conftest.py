import pytest

from appframework.app_registry import AppRegistry
from appframework.component_state import ComponentStateStore
from appframework.principals import PrincipalDirectory
from appframework.services import AppFrameworkService

from .helpers import write_json

CATALOG = {
    "apps": [
        {"id": "registration", "label": "Registration"},
        {"id": "reports", "label": "Reports", "required_privilege": "View Reports"},
        {"id": "admin", "label": "Administration", "required_privilege": "Manage Apps"},
    ],
    "extensions": [
        {
            "id": "registration.link",
            "app_id": "registration",
            "extension_point_id": "homepageLink",
        },
        {
            "id": "reports.link",
            "app_id": "reports",
            "extension_point_id": "homepageLink",
            "required_privilege": "View Reports",
        },
        {
            "id": "reports.dashboard",
            "app_id": "reports",
            "extension_point_id": "dashboardWidget",
        },
        {
            "id": "admin.link",
            "app_id": "admin",
            "extension_point_id": "HomepageLink",
            "required_privilege": "Manage Apps",
        },
    ],
}

DIRECTORY = {
    "privileges": [
        {"name": "View Reports", "description": "See the reporting app"},
        "Manage Apps",
    ],
    "users": [
        {"username": "admin", "unrestricted": True},
        {"username": "clerk", "privileges": []},
        {"username": "analyst", "privileges": ["View Reports"]},
        {"username": "manager", "privileges": ["Manage Apps"]},
    ],
}


@pytest.fixture
def catalog_path(tmp_path):
    return write_json(tmp_path / "app_catalog.json", CATALOG)


@pytest.fixture
def directory_path(tmp_path):
    return write_json(tmp_path / "principals.json", DIRECTORY)


@pytest.fixture
def state_path(tmp_path):
    return str(tmp_path / "component_state.json")


@pytest.fixture
def directory(directory_path):
    return PrincipalDirectory(directory_path)


@pytest.fixture
def service(catalog_path, state_path, directory):
    return AppFrameworkService(
        AppRegistry(catalog_path), ComponentStateStore(state_path), directory
    )
