"""Semantic search over specifications."""

from spox.search._embedding import EmbeddingProvider, HashingEmbeddingProvider, tokenize
from spox.search._index import (
    DEFAULT_SNIPPET_LENGTH,
    DEFAULT_TOP_K,
    EmbedFunction,
    IndexedRequirement,
    IndexedSpec,
    SearchResult,
    SpecIndex,
    build_index,
    cosine_similarity,
    make_snippet,
    requirement_text,
    search,
)
from spox.search._io import INDEX_FORMAT_VERSION, load_index, save_index

__all__ = [
    "DEFAULT_SNIPPET_LENGTH",
    "DEFAULT_TOP_K",
    "INDEX_FORMAT_VERSION",
    "EmbedFunction",
    "EmbeddingProvider",
    "HashingEmbeddingProvider",
    "IndexedRequirement",
    "IndexedSpec",
    "SearchResult",
    "SpecIndex",
    "build_index",
    "cosine_similarity",
    "load_index",
    "make_snippet",
    "requirement_text",
    "save_index",
    "search",
    "tokenize",
]
