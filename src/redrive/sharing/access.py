"""Abstract sharing scopes and permission levels (DriveApp.Access / Permission)."""

from __future__ import annotations

from enum import Enum


class Access(Enum):
    """Who may access a shared resource."""

    ANYONE = "ANYONE"
    ANYONE_WITH_LINK = "ANYONE_WITH_LINK"
    DOMAIN = "DOMAIN"
    DOMAIN_WITH_LINK = "DOMAIN_WITH_LINK"
    PRIVATE = "PRIVATE"


class Permission(Enum):
    """What an accessor may do."""

    VIEW = "VIEW"
    EDIT = "EDIT"
    COMMENT = "COMMENT"
    OWNER = "OWNER"
    ORGANIZER = "ORGANIZER"
    FILE_ORGANIZER = "FILE_ORGANIZER"
    NONE = "NONE"
