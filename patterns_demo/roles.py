"""Factory Method demonstration: roles and the creators that build them.

Each concrete :class:`RoleCreator` decides which :class:`Role` it builds,
so callers only depend on the creator interface.

Usage:
creator = creator_for(RoleKind.ADMIN)
role = creator.create_role()
role.display_role()
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import IntEnum
from typing import ClassVar

from .errors import UnknownRoleKind

LOGGER = logging.getLogger(__name__)


class RoleKind(IntEnum):
    """Variants of role the factory can produce.

    :cvar ADMIN: An administrator
    :cvar GUEST: A guest
    :cvar MANAGER: A manager
    """

    ADMIN = 0
    GUEST = 1
    MANAGER = 2


class Role(ABC):
    """A fixed identity that can describe itself."""

    kind: ClassVar[RoleKind]

    @abstractmethod
    def description(self) -> str:
        """Return the line identifying this role."""

    def display_role(self) -> None:
        """Print the line identifying this role."""
        print(self.description())


class Admin(Role):
    kind = RoleKind.ADMIN

    def description(self) -> str:
        return "I am an Administrator."


class Guest(Role):
    kind = RoleKind.GUEST

    def description(self) -> str:
        return "I am a Guest."


class Manager(Role):
    kind = RoleKind.MANAGER

    def description(self) -> str:
        return "I am a Manager."


class RoleCreator(ABC):
    """Creator side of the factory method. Stateless."""

    @abstractmethod
    def create_role(self) -> Role:
        """Create a new role of the variant this creator is responsible for.

        :return: A fresh role instance
        """


class AdminCreator(RoleCreator):
    def create_role(self) -> Role:
        LOGGER.debug("Creating %s role", RoleKind.ADMIN.name)
        return Admin()


class GuestCreator(RoleCreator):
    def create_role(self) -> Role:
        LOGGER.debug("Creating %s role", RoleKind.GUEST.name)
        return Guest()


class ManagerCreator(RoleCreator):
    def create_role(self) -> Role:
        LOGGER.debug("Creating %s role", RoleKind.MANAGER.name)
        return Manager()


_CREATORS: dict[RoleKind, type[RoleCreator]] = {
    RoleKind.ADMIN: AdminCreator,
    RoleKind.GUEST: GuestCreator,
    RoleKind.MANAGER: ManagerCreator,
}


def creator_for(kind: RoleKind) -> RoleCreator:
    """Return the creator responsible for a role kind.

    :param kind: The variant of role to be created
    :return: A creator whose ``create_role`` builds that variant
    :raises UnknownRoleKind: If ``kind`` is not a :class:`RoleKind`
    """
    try:
        creator_class = _CREATORS[RoleKind(kind)]
    except (KeyError, ValueError) as e:
        msg = f"No role creator for kind: {kind!r}"
        raise UnknownRoleKind(msg) from e
    return creator_class()
