from enum import Enum
from typing import FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, Field


class AppDescriptor(BaseModel):
    """A top-level pluggable UI component."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique identifier of the app")
    label: Optional[str] = Field(None, description="Display name of the app")
    description: Optional[str] = Field(None, description="Short description")
    url: Optional[str] = Field(None, description="Entry point of the app")
    icon: Optional[str] = Field(None, description="Icon shown next to the label")
    order: int = Field(0, description="Sort hint for UIs rendering the app")
    required_privilege: Optional[str] = Field(
        None, description="Privilege a user must hold to see the app"
    )


class Extension(BaseModel):
    """A UI fragment an app attaches to a named extension point."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique identifier of the extension")
    app_id: str = Field(..., description="Id of the app providing the extension")
    extension_point_id: str = Field(
        ..., description="Id of the extension point the extension attaches to"
    )
    type: str = Field("link", description="Kind of fragment, e.g. link or include")
    label: Optional[str] = Field(None, description="Display name of the extension")
    url: Optional[str] = Field(None, description="Target of the extension")
    icon: Optional[str] = Field(None, description="Icon shown next to the label")
    order: int = Field(0, description="Sort hint within the extension point")
    required_privilege: Optional[str] = Field(
        None, description="Privilege a user must hold to see the extension"
    )


class ComponentType(str, Enum):
    APP = "APP"
    EXTENSION = "EXTENSION"


class ComponentState(BaseModel):
    """Explicit enabled/disabled override for an app or extension."""

    component_id: str = Field(..., description="Id of the app or extension")
    component_type: ComponentType = Field(..., description="Kind of component")
    enabled: bool = Field(True, description="Whether the component is enabled")


class Privilege(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Unique privilege name")
    description: Optional[str] = Field(None, description="What the privilege grants")


class Principal(BaseModel):
    """The user a query is evaluated for."""

    model_config = ConfigDict(frozen=True)

    username: Optional[str] = Field(None, description="Name the user is known by")
    unrestricted: bool = Field(
        False, description="Superuser flag, bypasses all privilege checks"
    )
    privileges: FrozenSet[str] = Field(
        frozenset(), description="Names of the privileges held by the user"
    )

    def has_privilege(self, privilege: Privilege) -> bool:
        return privilege.name in self.privileges
