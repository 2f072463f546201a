"""Strategy demonstration: interchangeable text transforms.

An :class:`Encryptor` delegates to whichever :class:`EncryptionStrategy` was
set last. None of the strategies are meant to be secure.

Usage:
encryptor = Encryptor()
encryptor.set_strategy(Base64Encryption())
encryptor.encrypt_data("Hello")
"""

from __future__ import annotations

import base64
import logging
import re
import struct
from abc import ABC, abstractmethod

from .errors import EncryptionStrategyNotSet

LOGGER = logging.getLogger(__name__)

DEFAULT_XOR_KEY = 0x5A
_BYTE_UPPER_BOUND = 256
_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def _printable(text: str) -> str:
    """Replace lone surrogates with U+FFFD so the text can be written as UTF-8."""
    return _LONE_SURROGATE.sub("\ufffd", text)


def _base64(data: bytes) -> str:
    """Standard RFC 4648 Base64 with padding."""
    return base64.b64encode(data).decode("ascii")


def xor_bytes(data: bytes, key: int) -> bytes:
    """XOR every byte of ``data`` with ``key``.

    Applying it twice with the same key gives back the input.

    :param data: The bytes to transform
    :param key: A single byte value
    :return: The transformed bytes
    """
    return bytes(byte ^ key for byte in data)


class EncryptionStrategy(ABC):
    """A text transform selectable at runtime."""

    @abstractmethod
    def encrypt(self, text: str) -> str:
        """Transform ``text``.

        :param text: The text to encrypt
        :return: The encrypted text
        """


class Base64Encryption(EncryptionStrategy):
    """Base64 of the UTF-8 bytes of the text."""

    def encrypt(self, text: str) -> str:
        return _base64(text.encode("utf-8"))


class XorEncryption(EncryptionStrategy):
    """XOR the UTF-8 bytes of the text with a one byte key, then Base64 them.

    :param key: The byte every input byte is XORed with
    :raises ValueError: If the key does not fit in one byte
    """

    def __init__(self, key: int = DEFAULT_XOR_KEY) -> None:
        if not 0 <= key < _BYTE_UPPER_BOUND:
            msg = f"XOR key must fit in one byte, got: {key}"
            raise ValueError(msg)
        self.key = key

    def encrypt(self, text: str) -> str:
        return _base64(xor_bytes(text.encode("utf-8"), self.key))

    def __repr__(self) -> str:
        return f"XorEncryption(key={self.key:#04x})"


class ReverseEncryption(EncryptionStrategy):
    """Reverse the UTF-16 code units of the text.

    Characters outside the Basic Multilingual Plane are stored as surrogate
    pairs, so reversing splits them and the result can hold lone surrogates.
    """

    def encrypt(self, text: str) -> str:
        raw = text.encode("utf-16-le", "surrogatepass")
        count = len(raw) // 2
        units = struct.unpack(f"<{count}H", raw)
        reversed_raw = struct.pack(f"<{count}H", *reversed(units))
        return reversed_raw.decode("utf-16-le", "surrogatepass")


class Encryptor:
    """Context of the strategy pattern.

    Starts without a strategy; one must be set with :meth:`set_strategy`
    before :meth:`encrypt` can succeed.
    """

    def __init__(self) -> None:
        self.strategy: EncryptionStrategy | None = None

    def set_strategy(self, strategy: EncryptionStrategy) -> None:
        """Replace the current strategy.

        :param strategy: The strategy used by later calls
        """
        LOGGER.debug("Encryption strategy set to %r", strategy)
        self.strategy = strategy

    def encrypt(self, text: str) -> str:
        """Encrypt ``text`` with the current strategy.

        :param text: The text to encrypt
        :return: The encrypted text
        :raises EncryptionStrategyNotSet: If no strategy has been set
        """
        if self.strategy is None:
            msg = "Encryption strategy not set."
            raise EncryptionStrategyNotSet(msg)
        return self.strategy.encrypt(text)

    def encrypt_data(self, text: str) -> None:
        """Print ``text`` and its encrypted form.

        Prints a notice instead when no strategy has been set. Lone
        surrogates left by :class:`ReverseEncryption` are printed as U+FFFD.

        :param text: The text to encrypt
        """
        try:
            encrypted = self.encrypt(text)
        except EncryptionStrategyNotSet as e:
            LOGGER.warning("Skipping encryption: %s", e)
            print(e)
            return

        print("Original: " + _printable(text))
        print("Encrypted: " + _printable(encrypted))
