"""Roles and grantee types of Drive permissions."""

from __future__ import annotations

from enum import Enum


class Role(Enum):
    """Access role granted by a permission."""

    OWNER = "owner"
    ORGANIZER = "organizer"
    FILE_ORGANIZER = "fileOrganizer"
    WRITER = "writer"
    COMMENTER = "commenter"
    READER = "reader"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> Role:
        try:
            return cls(text)
        except ValueError:
            raise ValueError(
                f"'{text}' is not a valid role, valid roles are: "
                "owner, organizer, fileOrganizer, writer, commenter, reader"
            ) from None


class PermissionType(Enum):
    """Kind of grantee a permission applies to."""

    USER = "user"
    GROUP = "group"
    DOMAIN = "domain"
    ANYONE = "anyone"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> PermissionType:
        try:
            return cls(text)
        except ValueError:
            raise ValueError(
                f"'{text}' is not a valid type, valid types are: "
                "user, group, domain, anyone"
            ) from None

    def requires_email(self) -> bool:
        return self in (PermissionType.USER, PermissionType.GROUP)

    def requires_domain(self) -> bool:
        return self is PermissionType.DOMAIN

    def supports_file_discovery(self) -> bool:
        return self in (PermissionType.DOMAIN, PermissionType.ANYONE)


DEFAULT_ROLE = Role.READER
DEFAULT_TYPE = PermissionType.ANYONE