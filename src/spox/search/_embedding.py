"""Embedding providers.

The index only depends on :class:`EmbeddingProvider`: something with a
``model_name`` and an ``embed(text)`` method returning a fixed-length vector.
:class:`HashingEmbeddingProvider` is the built-in implementation. It needs no
model download and no network, and maps text to a signed feature-hashing
vector over lowercased word tokens.
"""

import hashlib
import re
from collections.abc import Sequence
from typing import Final, Protocol, runtime_checkable

import numpy as np
from numpy.typing import NDArray

from spox.config import SearchConfiguration  # noqa: TC001

__all__ = ["EmbeddingProvider", "HashingEmbeddingProvider", "tokenize"]

_TOKEN_PATTERN: Final = re.compile(r"[\w']+")


def tokenize(text: str) -> list[str]:
    """Tokenize ``text`` into lowercased word tokens."""
    return [match.group(0).lower() for match in _TOKEN_PATTERN.finditer(text)]


@runtime_checkable
class EmbeddingProvider(Protocol):
    """Source of text embeddings.

    Implementations must be deterministic: the same text always yields the
    same vector, and every vector has the same length.
    """

    @property
    def model_name(self) -> str:
        """Identifier stored in the index to detect model changes."""
        ...

    def embed(self, text: str) -> Sequence[float]:
        """Return the embedding vector for ``text``."""
        ...


class HashingEmbeddingProvider:
    """Deterministic local embeddings via signed feature hashing.

    Each token is hashed with SHA-256; the digest picks a dimension and a
    sign, and the accumulated vector is L2-normalized. Texts sharing words
    therefore point in similar directions. Empty or token-free text maps to
    the zero vector.

    Args:
        dimension: Length of the produced vectors.
    """

    __slots__: Final = ("_dimension",)

    def __init__(self, dimension: int = 384) -> None:
        if dimension <= 0:
            msg = f"dimension must be positive, got {dimension}"
            raise ValueError(msg)
        self._dimension: int = dimension

    @classmethod
    def from_config(cls, config: SearchConfiguration) -> "HashingEmbeddingProvider":  # noqa: UP037
        """Create a provider sized by ``config.embedding_dimension``."""
        return cls(config.embedding_dimension)

    @property
    def dimension(self) -> int:
        return self._dimension

    @property
    def model_name(self) -> str:
        return f"hashing-sha256-{self._dimension}"

    def embed_array(self, text: str) -> NDArray[np.float32]:
        """Return the embedding as a float32 array."""
        vector = np.zeros(self._dimension, dtype=np.float32)
        for token in tokenize(text):
            digest = hashlib.sha256(token.encode("utf-8")).digest()
            bucket = int.from_bytes(digest[:8], "big") % self._dimension
            vector[bucket] += 1.0 if digest[8] & 1 else -1.0

        norm = np.linalg.norm(vector)
        if norm == 0.0:
            return vector
        return vector / norm

    def embed(self, text: str) -> tuple[float, ...]:
        return tuple(float(value) for value in self.embed_array(text))
