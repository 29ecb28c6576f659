"""
HTTP routes for apps and extensions.

Callers are identified by the principal header, not authenticated. Serve
these routes only on a trusted network or behind a proxy that sets the
header from a verified identity.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request

from .config import MANAGE_COMPONENTS_PRIVILEGE, PRINCIPAL_HEADER
from .models import AppDescriptor, Extension, Principal
from .principals import PrincipalDirectory
from .services import (
    AppFrameworkService,
    UnknownPrivilegeError,
    app_framework_service,
    principal_directory,
)


apps_router = APIRouter()
extensions_router = APIRouter()


def get_service() -> AppFrameworkService:
    return app_framework_service


def get_principal_directory() -> PrincipalDirectory:
    return principal_directory


def get_current_principal(
    request: Request,
    directory: PrincipalDirectory = Depends(get_principal_directory),
) -> Optional[Principal]:
    """Identify the caller from the principal header; None means anonymous."""
    return directory.find_principal(request.headers.get(PRINCIPAL_HEADER))


def require_component_manager(
    service: AppFrameworkService = Depends(get_service),
    principal: Optional[Principal] = Depends(get_current_principal),
):
    """Only superusers and holders of the manage privilege may toggle components."""
    if principal is None:
        raise HTTPException(403, detail="Not allowed to manage components")
    if principal.unrestricted:
        return
    try:
        allowed = service.holds_privilege(principal, MANAGE_COMPONENTS_PRIVILEGE)
    except UnknownPrivilegeError as e:
        raise HTTPException(500, detail=str(e))
    if not allowed:
        raise HTTPException(403, detail="Not allowed to manage components")


@apps_router.get("/", response_model=List[AppDescriptor])
def list_apps(service: AppFrameworkService = Depends(get_service)):
    """List every app in the catalog."""
    return service.list_apps()


@apps_router.get("/enabled", response_model=List[AppDescriptor])
def list_enabled_apps(service: AppFrameworkService = Depends(get_service)):
    return service.list_enabled_apps()


@apps_router.get("/visible", response_model=List[AppDescriptor])
def list_visible_apps(
    service: AppFrameworkService = Depends(get_service),
    principal: Optional[Principal] = Depends(get_current_principal),
):
    """List the enabled apps the calling user may see."""
    try:
        return service.list_apps_for_principal(principal)
    except UnknownPrivilegeError as e:
        raise HTTPException(500, detail=str(e))


@apps_router.get("/{app_id}/extensions", response_model=List[Extension])
def list_app_extensions(
    app_id: str,
    extension_point_id: str,
    enabled_only: bool = False,
    service: AppFrameworkService = Depends(get_service),
):
    if enabled_only:
        return service.list_enabled_extensions(app_id, extension_point_id)
    return service.list_extensions(app_id, extension_point_id)


@apps_router.post(
    "/{app_id}/enable", dependencies=[Depends(require_component_manager)]
)
def enable_app(app_id: str, service: AppFrameworkService = Depends(get_service)):
    if not service.registry.find_app(app_id):
        raise HTTPException(404, detail="App not found")
    service.enable_app(app_id)
    return {"message": "Enabled", "app_id": app_id}


@apps_router.post(
    "/{app_id}/disable", dependencies=[Depends(require_component_manager)]
)
def disable_app(app_id: str, service: AppFrameworkService = Depends(get_service)):
    if not service.registry.find_app(app_id):
        raise HTTPException(404, detail="App not found")
    service.disable_app(app_id)
    return {"message": "Disabled", "app_id": app_id}


@extensions_router.get("/", response_model=List[Extension])
def list_extensions_by_point(
    extension_point_id: Optional[str] = None,
    service: AppFrameworkService = Depends(get_service),
):
    """List the extensions attached to an extension point."""
    return service.list_enabled_extensions_by_point(extension_point_id)


@extensions_router.get("/visible", response_model=List[Extension])
def list_visible_extensions(
    extension_point_id: Optional[str] = None,
    service: AppFrameworkService = Depends(get_service),
    principal: Optional[Principal] = Depends(get_current_principal),
):
    """List the extensions the calling user may see."""
    try:
        return service.list_extensions_for_principal(principal, extension_point_id)
    except UnknownPrivilegeError as e:
        raise HTTPException(500, detail=str(e))


@extensions_router.post(
    "/{extension_id}/enable", dependencies=[Depends(require_component_manager)]
)
def enable_extension(
    extension_id: str, service: AppFrameworkService = Depends(get_service)
):
    if not service.registry.find_extension(extension_id):
        raise HTTPException(404, detail="Extension not found")
    service.enable_extension(extension_id)
    return {"message": "Enabled", "extension_id": extension_id}


@extensions_router.post(
    "/{extension_id}/disable", dependencies=[Depends(require_component_manager)]
)
def disable_extension(
    extension_id: str, service: AppFrameworkService = Depends(get_service)
):
    if not service.registry.find_extension(extension_id):
        raise HTTPException(404, detail="Extension not found")
    service.disable_extension(extension_id)
    return {"message": "Disabled", "extension_id": extension_id}
