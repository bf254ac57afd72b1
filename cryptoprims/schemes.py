"""Abstract interfaces for hashes, commitments and encryption schemes."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Any


class CRHScheme(ABC):
    """A collision-resistant hash taking a single input."""

    @abstractmethod
    def setup(self, rng: random.Random) -> Any:
        """Sample public parameters for the hash."""

    @abstractmethod
    def evaluate(self, parameters: Any, data: Any) -> Any:
        """Hash ``data`` under ``parameters``."""


class TwoToOneCRHScheme(ABC):
    """A collision-resistant hash combining two inputs, as used for tree nodes."""

    @abstractmethod
    def setup(self, rng: random.Random) -> Any:
        """Sample public parameters for the hash."""

    @abstractmethod
    def evaluate(self, parameters: Any, left: Any, right: Any) -> Any:
        """Hash two raw inputs together."""

    @abstractmethod
    def compress(self, parameters: Any, left: Any, right: Any) -> Any:
        """Hash two previous outputs together."""


class CommitmentScheme(ABC):
    """A hiding and binding commitment to a byte string."""

    @abstractmethod
    def setup(self, rng: random.Random) -> Any:
        """Sample public parameters for the commitment."""

    @abstractmethod
    def commit(self, parameters: Any, data: bytes, randomness: Any) -> Any:
        """Commit to ``data`` using ``randomness``."""


class AsymmetricEncryptionScheme(ABC):
    """A public-key encryption scheme."""

    @abstractmethod
    def setup(self, rng: random.Random) -> Any:
        """Sample public parameters."""

    @abstractmethod
    def keygen(self, parameters: Any, rng: random.Random) -> tuple[Any, Any]:
        """Return a ``(public_key, secret_key)`` pair."""

    @abstractmethod
    def encrypt(self, parameters: Any, public_key: Any, message: Any, randomness: Any) -> Any:
        """Encrypt ``message`` to ``public_key``."""

    @abstractmethod
    def decrypt(self, parameters: Any, secret_key: Any, ciphertext: Any) -> Any:
        """Recover the plaintext from ``ciphertext``."""