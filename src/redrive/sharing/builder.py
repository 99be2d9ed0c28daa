"""Build version-specific permission resources from (Access, Permission)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from redrive.context import ApiVersion
from redrive.errors import (
    InvalidArgumentError,
    InvalidPermissionCombinationError,
    UnsupportedPermissionError,
)

from .access import Access, Permission

PERMISSION_KIND: str = "drive#permission"

_LINK_SCOPES: frozenset[Access] = frozenset({Access.ANYONE_WITH_LINK, Access.DOMAIN_WITH_LINK})
_DOMAIN_SCOPES: frozenset[Access] = frozenset({Access.DOMAIN, Access.DOMAIN_WITH_LINK})

_ROLES: dict[Permission, str] = {
    Permission.VIEW: "reader",
    Permission.EDIT: "writer",
    Permission.OWNER: "owner",
}


@dataclass(frozen=True)
class PermissionRequest:
    """
    A permission to create on one file.

    Attributes:
        type: Grantee type ("user", "domain", "anyone").
        role: Drive role, or None when nothing is granted (Permission.NONE).
        value: Email or domain of the grantee, for user/domain types.
        with_link: Link-only sharing for anyone/domain grantees.
        additional_roles: v2 extra roles (COMMENT is reader + commenter).
    """

    access: Optional[Access]
    permission: Permission
    type: str
    role: Optional[str]
    value: Optional[str] = None
    with_link: Optional[bool] = None
    additional_roles: tuple[str, ...] = ()

    @property
    def grants_access(self) -> bool:
        return self.role is not None

    @property
    def allow_file_discovery(self) -> Optional[bool]:
        """v3 spelling of with_link (inverted)."""
        if self.with_link is None:
            return None
        return not self.with_link

    def to_resource(self, version: ApiVersion) -> dict[str, Any]:
        """Wire permission resource for the given dialect."""
        resource: dict[str, Any] = {
            "kind": PERMISSION_KIND,
            "type": self.type,
            "role": self.role,
        }

        version = ApiVersion.require(version)
        if version is ApiVersion.V2:
            if self.value is not None:
                resource["value"] = self.value
            if self.with_link is not None:
                resource["withLink"] = self.with_link
            if self.additional_roles:
                resource["additionalRoles"] = list(self.additional_roles)
            return resource

        if self.value is not None:
            key = "domain" if self.type == "domain" else "emailAddress"
            resource[key] = self.value
        if self.allow_file_discovery is not None:
            resource["allowFileDiscovery"] = self.allow_file_discovery
        return resource


def _domain_of(email: Optional[str]) -> str:
    if not email or "@" not in email:
        raise InvalidArgumentError(
            "Domain sharing requires the effective user's email address",
            details={"email": email},
        )
    return email.split("@", 1)[1]


def validate_sharing(access: Access, permission: Permission) -> None:
    """
    Reject pairs Drive refuses, independent of API version and grantee.

    Raises:
        InvalidArgumentError: if either value is not an enum member.
        UnsupportedPermissionError: for ORGANIZER and FILE_ORGANIZER.
        InvalidPermissionCombinationError: for NONE with anything but ANYONE.
    """
    if not isinstance(access, Access) or not isinstance(permission, Permission):
        raise InvalidArgumentError(
            "access and permission must be Access and Permission members",
            details={"access": access, "permission": permission},
        )

    if permission in (Permission.ORGANIZER, Permission.FILE_ORGANIZER):
        raise UnsupportedPermissionError(
            f"Invalid permission type {permission.name}",
            details={"permission": permission.name},
        )

    if permission is Permission.NONE and access is not Access.ANYONE:
        raise InvalidPermissionCombinationError(
            "Permission.NONE can only be paired with Access.ANYONE",
            details={"access": access.name, "permission": permission.name},
        )


def _resolve_role(
    permission: Permission,
    version: ApiVersion,
) -> tuple[Optional[str], tuple[str, ...]]:
    if permission is Permission.NONE:
        return None, ()

    if permission is Permission.COMMENT:
        if version is ApiVersion.V2:
            return "reader", ("commenter",)
        return "commenter", ()

    return _ROLES[permission], ()


def build_permission(
    access: Access,
    permission: Permission,
    owner_email: Optional[str],
    version: ApiVersion,
) -> PermissionRequest:
    """
    Translate an (access, permission) pair into a PermissionRequest.

    Raises:
        UnsupportedPermissionError: for ORGANIZER and FILE_ORGANIZER.
        InvalidPermissionCombinationError: for NONE with anything but ANYONE.
        InvalidArgumentError: when a DOMAIN/PRIVATE scope lacks an owner email.
    """
    validate_sharing(access, permission)
    version = ApiVersion.require(version)

    role, additional_roles = _resolve_role(permission, version)

    value: Optional[str] = None
    with_link: Optional[bool] = None
    if access is Access.PRIVATE:
        if not owner_email:
            raise InvalidArgumentError("Private sharing requires the effective user's email")
        grantee_type = "user"
        value = owner_email
    elif access in _DOMAIN_SCOPES:
        grantee_type = "domain"
        value = _domain_of(owner_email)
        with_link = access in _LINK_SCOPES
    else:
        grantee_type = "anyone"
        with_link = access in _LINK_SCOPES

    return PermissionRequest(
        access=access,
        permission=permission,
        type=grantee_type,
        role=role,
        value=value,
        with_link=with_link,
        additional_roles=additional_roles,
    )


def viewer_permission(email: str) -> PermissionRequest:
    """Reader permission for one user (File.addViewer)."""
    if not isinstance(email, str) or "@" not in email:
        raise InvalidArgumentError("Viewer email must be an email address", details={"email": email})
    return PermissionRequest(
        access=None,
        permission=Permission.VIEW,
        type="user",
        role="reader",
        value=email,
    )
