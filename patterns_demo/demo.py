"""The fixed demonstration sequence printed by the program."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .encryption import Base64Encryption, Encryptor, ReverseEncryption, XorEncryption
from .filesystem import build_sample_tree
from .roles import AdminCreator, GuestCreator, ManagerCreator

if TYPE_CHECKING:
    from .config import AppConfig
    from .roles import RoleCreator

LOGGER = logging.getLogger(__name__)

_ROOT_DEPTH = 1


def show_factory_method() -> None:
    """Create one role per creator and let each describe itself."""
    print("=== Factory Method ===")
    creators: list[RoleCreator] = [AdminCreator(), GuestCreator(), ManagerCreator()]
    roles = [creator.create_role() for creator in creators]
    for role in roles:
        role.display_role()


def show_composite() -> None:
    """Print the listing of the sample file system tree."""
    print("\n=== Composite (File System) ===")
    build_sample_tree().display(_ROOT_DEPTH)


def show_strategy(text: str, xor_key: int) -> None:
    """Encrypt ``text`` with every strategy, starting with none set.

    :param text: The text to encrypt
    :param xor_key: Key used by the XOR strategy
    """
    print("\n=== Strategy (Encryption) ===")
    encryptor = Encryptor()
    encryptor.encrypt_data(text)
    for strategy in (Base64Encryption(), XorEncryption(xor_key), ReverseEncryption()):
        encryptor.set_strategy(strategy)
        encryptor.encrypt_data(text)


def run_demo(config: AppConfig) -> None:
    """Run every demonstration section in order.

    :param config: The application configuration
    """
    LOGGER.debug("Running demonstration with %s", config)
    show_factory_method()
    show_composite()
    if config.show_encryption:
        show_strategy(config.demo_text, config.xor_key)
