# pyright: reportUnknownMemberType=false, reportAny=false
"""Semantic search index over specifications.

The index stores one embedding per spec purpose and one per requirement
(name and description together). Searching embeds the query once and scores
it against every requirement vector by cosine similarity; purpose vectors are
stored for spec-level lookups but not ranked. There is no approximate
nearest-neighbor structure, so results are exact.
"""

from collections.abc import Callable, Iterable, Sequence  # noqa: TC003
from dataclasses import dataclass
from typing import Final

import numpy as np
import structlog
from numpy.typing import NDArray
from structlog.typing import FilteringBoundLogger  # noqa: TC002

from spox.config import SearchConfiguration
from spox.exceptions import EmbeddingError, IndexUnavailableError, SearchIndexError
from spox.search._embedding import EmbeddingProvider
from spox.spec import Spec  # noqa: TC001

__all__ = [
    "DEFAULT_SNIPPET_LENGTH",
    "DEFAULT_TOP_K",
    "EmbedFunction",
    "IndexedRequirement",
    "IndexedSpec",
    "SearchResult",
    "SpecIndex",
    "build_index",
    "cosine_similarity",
    "make_snippet",
    "requirement_text",
    "search",
]

DEFAULT_TOP_K: Final = 10
DEFAULT_SNIPPET_LENGTH: Final = 100
_ELLIPSIS: Final = "..."
_CUSTOM_MODEL: Final = "custom"

type EmbedFunction = Callable[[str], Sequence[float]]
type Embedder = EmbeddingProvider | EmbedFunction


# =============================================================================
# Index Models
# =============================================================================


@dataclass(frozen=True, slots=True)
class IndexedRequirement:
    """A requirement and its embedding.

    Attributes:
        name: Requirement name.
        description: Requirement description, used for snippets.
        description_embedding: Embedding of ``name`` and ``description``.
    """

    name: str
    description: str
    description_embedding: tuple[float, ...]


@dataclass(frozen=True, slots=True)
class IndexedSpec:
    """A specification's searchable content.

    Attributes:
        spec_id: Capability identifier.
        title: Spec title, for display.
        purpose: Purpose text, kept for spec-level display.
        purpose_embedding: Embedding of the purpose text.
        requirements: Indexed requirements in spec order.
    """

    spec_id: str
    title: str
    purpose: str
    purpose_embedding: tuple[float, ...]
    requirements: tuple[IndexedRequirement, ...] = ()


@dataclass(frozen=True, slots=True)
class SpecIndex:
    """An immutable search index.

    Attributes:
        model_name: Embedding model the vectors were produced with.
        specs: Indexed specs in corpus order.
    """

    model_name: str
    specs: tuple[IndexedSpec, ...] = ()

    @property
    def requirement_count(self) -> int:
        return sum(len(spec.requirements) for spec in self.specs)

    @property
    def dimension(self) -> int | None:
        """Embedding length, or None for an empty index."""
        for spec in self.specs:
            return len(spec.purpose_embedding)
        return None


@dataclass(frozen=True, slots=True)
class SearchResult:
    """A ranked search match.

    Attributes:
        spec_id: Capability the match belongs to.
        requirement_name: Matched requirement. None is reserved for
            spec-level matches, which :func:`search` does not produce.
        score: Cosine similarity between query and match.
        snippet: Leading text of the matched description or purpose.
    """

    spec_id: str
    requirement_name: str | None
    score: float
    snippet: str


# =============================================================================
# Helpers
# =============================================================================


def requirement_text(name: str, description: str) -> str:
    """Text embedded for a requirement."""
    return f"{name}\n{description}"


def make_snippet(text: str, max_length: int = DEFAULT_SNIPPET_LENGTH) -> str:
    """Return ``text`` cut to ``max_length`` characters, ellipsis included.

    Example:
        >>> make_snippet("hello world foo bar", 15)
        'hello world ...'
    """
    if len(text) <= max_length:
        return text
    return text[: max(max_length - len(_ELLIPSIS), 0)] + _ELLIPSIS


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Cosine similarity of two vectors.

    Vectors of different length, empty vectors and zero vectors score 0.
    """
    if len(a) != len(b) or not a:
        return 0.0
    left = np.asarray(a, dtype=np.float64)
    right = np.asarray(b, dtype=np.float64)
    denominator = float(np.linalg.norm(left) * np.linalg.norm(right))
    if denominator == 0.0:
        return 0.0
    return float(np.clip(np.dot(left, right) / denominator, -1.0, 1.0))


def _embed_function(embed: Embedder) -> EmbedFunction:
    if isinstance(embed, EmbeddingProvider):
        return embed.embed
    return embed


def _embed(function: EmbedFunction, text: str) -> NDArray[np.float32]:
    try:
        vector = function(text)
    except Exception as e:  # noqa: BLE001
        raise EmbeddingError(str(e), text=text, cause=e) from e

    array = np.asarray(vector, dtype=np.float32)
    if array.ndim != 1 or array.size == 0:
        msg = f"Embedding provider returned an invalid vector of shape {array.shape}"
        raise EmbeddingError(msg, text=text)
    return array


def _as_tuple(vector: NDArray[np.float32]) -> tuple[float, ...]:
    return tuple(float(value) for value in vector)


# =============================================================================
# Building
# =============================================================================


def build_index(
    specs: Iterable[Spec],
    embed: Embedder,
    model_name: str | None = None,
    *,
    on_progress: Callable[[int, int], None] | None = None,
    logger: FilteringBoundLogger | None = None,
) -> SpecIndex:
    """Embed a corpus of specifications.

    Each spec's purpose is embedded once and each requirement is embedded
    once, as its name and description joined by a newline.

    Args:
        specs: Specifications to index, in the order results should tie.
        embed: An :class:`EmbeddingProvider` or a plain ``text -> vector``
            callable.
        model_name: Name stored in the index. Defaults to the provider's
            ``model_name``, or ``"custom"`` for a plain callable.
        on_progress: Called as ``on_progress(done, total)`` after each text
            is embedded.
        logger: Logger for build diagnostics.

    Returns:
        The built index. An empty corpus yields a valid empty index.

    Raises:
        EmbeddingError: If the provider fails or returns a malformed vector.
        SearchIndexError: If the provider returns vectors of differing length.
    """
    log = logger if logger is not None else structlog.get_logger()
    corpus = list(specs)
    function = _embed_function(embed)
    if model_name is None:
        model_name = embed.model_name if isinstance(embed, EmbeddingProvider) else _CUSTOM_MODEL

    total = sum(1 + len(spec.requirements) for spec in corpus)
    done = 0
    dimension: int | None = None

    def embed_checked(text: str) -> tuple[float, ...]:
        nonlocal done, dimension
        vector = _embed(function, text)
        if dimension is None:
            dimension = vector.size
        elif vector.size != dimension:
            msg = (
                "Embedding dimension changed during build: "
                f"expected {dimension}, got {vector.size}"
            )
            raise SearchIndexError(msg)
        done += 1
        if on_progress is not None:
            on_progress(done, total)
        return _as_tuple(vector)

    log.info("index_build_started", model=model_name, specs=len(corpus), texts=total)

    indexed: list[IndexedSpec] = []
    for spec in corpus:
        purpose = spec.purpose or ""
        purpose_embedding = embed_checked(purpose)
        requirements = tuple(
            IndexedRequirement(
                name=requirement.name,
                description=requirement.description,
                description_embedding=embed_checked(
                    requirement_text(requirement.name, requirement.description)
                ),
            )
            for requirement in spec.requirements
        )
        indexed.append(
            IndexedSpec(
                spec_id=spec.id,
                title=spec.title,
                purpose=purpose,
                purpose_embedding=purpose_embedding,
                requirements=requirements,
            )
        )
        log.debug("spec_indexed", spec_id=spec.id, requirements=len(requirements))

    log.info("index_build_finished", model=model_name, specs=len(indexed), texts=done)
    return SpecIndex(model_name=model_name, specs=tuple(indexed))


# =============================================================================
# Searching
# =============================================================================


def _resolve(
    config: SearchConfiguration | None,
    top_k: int | None,
    min_score: float | None,
    snippet_length: int | None,
) -> tuple[int, float, int]:
    resolved = config if config is not None else SearchConfiguration()
    return (
        resolved.top_k if top_k is None else top_k,
        resolved.min_score if min_score is None else min_score,
        resolved.snippet_length if snippet_length is None else snippet_length,
    )


def search(
    index: SpecIndex | None,
    query: str,
    embed: Embedder,
    top_k: int | None = None,
    *,
    min_score: float | None = None,
    snippet_length: int | None = None,
    config: SearchConfiguration | None = None,
    logger: FilteringBoundLogger | None = None,
) -> list[SearchResult]:
    """Rank indexed requirements by similarity to ``query``.

    Purpose embeddings are kept in the index but are not ranked here.

    Args:
        index: The index to search.
        query: Natural-language query text.
        embed: The provider the index was built with.
        top_k: Maximum number of results.
        min_score: Candidates scoring below this are dropped. Candidates
            scoring zero or less never match.
        snippet_length: Maximum snippet length, ellipsis included.
        config: Search section supplying ``top_k``, ``min_score`` and
            ``snippet_length`` when those arguments are omitted.
        logger: Logger for search diagnostics.

    Returns:
        At most ``top_k`` results, by non-increasing score. Equal scores keep
        corpus order.

    Raises:
        IndexUnavailableError: If ``index`` is None.
        ValueError: If ``query`` is blank or ``top_k`` is negative.
        EmbeddingError: If the provider fails on the query.
        SearchIndexError: If the query vector length differs from the index.
    """
    if index is None:
        msg = "No search index is available; build the index first"
        raise IndexUnavailableError(msg)
    if not query.strip():
        msg = "Search query must not be empty"
        raise ValueError(msg)
    top_k, min_score, snippet_length = _resolve(config, top_k, min_score, snippet_length)
    if top_k < 0:
        msg = f"top_k must not be negative, got {top_k}"
        raise ValueError(msg)

    log = logger if logger is not None else structlog.get_logger()
    if top_k == 0 or not index.specs:
        return []

    query_vector = _embed(_embed_function(embed), query)
    if index.dimension != query_vector.size:
        msg = (
            f"Query embedding has dimension {query_vector.size} but the index "
            f"was built with dimension {index.dimension}"
        )
        raise SearchIndexError(msg)

    candidates: list[tuple[str, str, str]] = []
    vectors: list[tuple[float, ...]] = []
    for spec in index.specs:
        for requirement in spec.requirements:
            candidates.append((spec.spec_id, requirement.name, requirement.description))
            vectors.append(requirement.description_embedding)
    if not candidates:
        return []

    matrix = np.asarray(vectors, dtype=np.float64)
    if matrix.ndim != 2 or matrix.shape[1] != query_vector.size:
        msg = "Index contains embeddings of inconsistent dimension"
        raise SearchIndexError(msg)

    query64 = query_vector.astype(np.float64)
    denominator = np.linalg.norm(matrix, axis=1) * np.linalg.norm(query64)
    scores = np.divide(
        matrix @ query64,
        denominator,
        out=np.zeros(len(candidates), dtype=np.float64),
        where=denominator > 0,
    )
    # float rounding can land a hair outside [-1, 1]
    scores = np.clip(scores, -1.0, 1.0)

    results: list[SearchResult] = []
    for position in np.argsort(-scores, kind="stable"):
        score = float(scores[position])
        if score <= 0.0 or score < min_score:
            break
        spec_id, requirement_name, text = candidates[position]
        results.append(
            SearchResult(
                spec_id=spec_id,
                requirement_name=requirement_name,
                score=score,
                snippet=make_snippet(text, snippet_length),
            )
        )
        if len(results) == top_k:
            break

    log.debug(
        "search_finished",
        query_length=len(query),
        candidates=len(candidates),
        results=len(results),
    )
    return results
