import logging
from typing import List, Optional, Union

from .app_registry import AppRegistry
from .component_state import ComponentStateStore
from .models import AppDescriptor, ComponentType, Extension, Principal
from .principals import PrincipalDirectory, PrivilegeResolver

logger = logging.getLogger(__name__)


class UnknownPrivilegeError(Exception):
    """A component requires a privilege the privilege store does not know."""

    def __init__(self, privilege_name: str):
        self.privilege_name = privilege_name
        super().__init__(f"Unknown privilege: {privilege_name}")


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _equals_ignore_case(left: Optional[str], right: Optional[str]) -> bool:
    """Character-wise comparison through both upper and lower case."""
    if left is None or right is None or len(left) != len(right):
        return False
    return all(
        a == b or a.upper() == b.upper() or a.upper().lower() == b.upper().lower()
        for a, b in zip(left, right)
    )


class AppFrameworkService:
    """Answers which apps and extensions are enabled and who may see them.

    Every call recomputes from the registry and state store, so the service
    itself holds no state beyond its collaborators.
    """

    def __init__(
        self,
        registry: AppRegistry,
        state_store: ComponentStateStore,
        privilege_resolver: PrivilegeResolver,
    ):
        self.registry = registry
        self.state_store = state_store
        self.privilege_resolver = privilege_resolver

    def _is_disabled(self, component_id: str, component_type: ComponentType) -> bool:
        state = self.state_store.get_state(component_id, component_type)
        return state is not None and not state.enabled

    def _is_permitted(
        self,
        component: Union[AppDescriptor, Extension],
        principal: Optional[Principal],
    ) -> bool:
        if _is_blank(component.required_privilege):
            return True
        return self.holds_privilege(principal, component.required_privilege)

    def holds_privilege(self, principal: Optional[Principal], privilege_name: str) -> bool:
        """Whether ``principal`` holds the privilege named ``privilege_name``.

        Raises UnknownPrivilegeError when the name cannot be resolved.
        """
        privilege = self.privilege_resolver.resolve_privilege(privilege_name)
        if privilege is None:
            logger.error(f"Unknown privilege '{privilege_name}'")
            raise UnknownPrivilegeError(privilege_name)

        return principal is not None and principal.has_privilege(privilege)

    def list_apps(self) -> List[AppDescriptor]:
        return self.registry.get_apps()

    def list_extensions(
        self, app_id: Optional[str], extension_point_id: Optional[str]
    ) -> List[Extension]:
        return [
            extension
            for extension in self.registry.get_extensions()
            if _equals_ignore_case(extension.app_id, app_id)
            and _equals_ignore_case(extension.extension_point_id, extension_point_id)
        ]

    def list_enabled_apps(self) -> List[AppDescriptor]:
        return [
            app
            for app in self.list_apps()
            if not self._is_disabled(app.id, ComponentType.APP)
        ]

    def list_enabled_extensions(
        self, app_id: Optional[str], extension_point_id: Optional[str]
    ) -> List[Extension]:
        return [
            extension
            for extension in self.list_extensions(app_id, extension_point_id)
            if not self._is_disabled(extension.id, ComponentType.EXTENSION)
        ]

    def list_enabled_extensions_by_point(
        self, extension_point_id: Optional[str]
    ) -> List[Extension]:
        """Extensions attached to ``extension_point_id``, matched case-sensitively.

        Component state is not consulted here yet, so disabled extensions and
        extensions of disabled apps are still returned.
        """
        if _is_blank(extension_point_id):
            return []

        return [
            extension
            for extension in self.registry.get_extensions()
            if extension.extension_point_id == extension_point_id
        ]

    def list_extensions_for_principal(
        self,
        principal: Optional[Principal],
        extension_point_id: Optional[str] = None,
    ) -> List[Extension]:
        """Extensions ``principal`` is allowed to see.

        An unrestricted principal gets the whole catalog whatever the
        extension point. An anonymous principal gets nothing unless an
        extension point is given, in which case only extensions without a
        required privilege are visible. Component state is not consulted.

        Raises UnknownPrivilegeError when a candidate extension requires a
        privilege that cannot be resolved.
        """
        if principal is None and extension_point_id is None:
            return []

        if principal is not None and principal.unrestricted:
            return self.registry.get_extensions()

        visible = []
        for extension in self.registry.get_extensions():
            if extension_point_id is not None and not _equals_ignore_case(
                extension_point_id, extension.extension_point_id
            ):
                continue
            if self._is_permitted(extension, principal):
                visible.append(extension)

        logger.debug(
            f"{len(visible)} extensions visible at point '{extension_point_id}' "
            f"for '{principal.username if principal else None}'"
        )
        return visible

    def list_apps_for_principal(
        self, principal: Optional[Principal]
    ) -> List[AppDescriptor]:
        """Enabled apps ``principal`` is allowed to see.

        Raises UnknownPrivilegeError when an enabled app requires a privilege
        that cannot be resolved.
        """
        if principal is None:
            return []

        enabled_apps = self.list_enabled_apps()
        if principal.unrestricted:
            return enabled_apps

        return [app for app in enabled_apps if self._is_permitted(app, principal)]

    def set_app_enabled(self, app_id: str, enabled: bool):
        self.state_store.set_state(app_id, ComponentType.APP, enabled)

    def set_extension_enabled(self, extension_id: str, enabled: bool):
        self.state_store.set_state(extension_id, ComponentType.EXTENSION, enabled)

    def enable_app(self, app_id: str):
        self.set_app_enabled(app_id, True)

    def disable_app(self, app_id: str):
        self.set_app_enabled(app_id, False)

    def enable_extension(self, extension_id: str):
        self.set_extension_enabled(extension_id, True)

    def disable_extension(self, extension_id: str):
        self.set_extension_enabled(extension_id, False)


# Global instances
principal_directory = PrincipalDirectory()
app_framework_service = AppFrameworkService(
    AppRegistry(), ComponentStateStore(), principal_directory
)
