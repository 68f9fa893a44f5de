# pyright: reportAny=false, reportExplicitAny=false
"""Index persistence.

An index is stored as a single orjson-encoded blob. Writes go to a temporary
file in the destination directory that is then renamed over the target, so a
failed write leaves any previous index intact.
"""

import tempfile
from pathlib import Path
from typing import Any, Final

import orjson

from spox.exceptions import IndexUnavailableError, SearchIndexError, StaleIndexError
from spox.search._index import IndexedRequirement, IndexedSpec, SpecIndex

__all__ = ["INDEX_FORMAT_VERSION", "load_index", "save_index"]

INDEX_FORMAT_VERSION: Final = 1


def _atomic_write(path: Path, content: bytes) -> None:
    """Write bytes to ``path`` atomically.

    Raises:
        SearchIndexError: If the write fails.
    """
    temp_path: Path | None = None
    try:
        _ = path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            mode="wb",
            dir=path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            temp_path = Path(f.name)
            _ = f.write(content)

        # Path.replace() is atomic on both POSIX and Windows
        _ = temp_path.replace(path)

    except OSError as e:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
        msg = f"Failed to write index: {e}"
        raise SearchIndexError(msg) from e


def _encode(index: SpecIndex) -> dict[str, Any]:
    return {
        "format_version": INDEX_FORMAT_VERSION,
        "model_name": index.model_name,
        "specs": [
            {
                "spec_id": spec.spec_id,
                "title": spec.title,
                "purpose": spec.purpose,
                "purpose_embedding": spec.purpose_embedding,
                "requirements": [
                    {
                        "name": requirement.name,
                        "description": requirement.description,
                        "description_embedding": requirement.description_embedding,
                    }
                    for requirement in spec.requirements
                ],
            }
            for spec in index.specs
        ],
    }


def _embedding(values: list[Any]) -> tuple[float, ...]:
    return tuple(float(value) for value in values)


def _decode(data: dict[str, Any]) -> SpecIndex:
    return SpecIndex(
        model_name=str(data["model_name"]),
        specs=tuple(
            IndexedSpec(
                spec_id=str(spec["spec_id"]),
                title=str(spec["title"]),
                purpose=str(spec["purpose"]),
                purpose_embedding=_embedding(spec["purpose_embedding"]),
                requirements=tuple(
                    IndexedRequirement(
                        name=str(requirement["name"]),
                        description=str(requirement["description"]),
                        description_embedding=_embedding(requirement["description_embedding"]),
                    )
                    for requirement in spec["requirements"]
                ),
            )
            for spec in data["specs"]
        ),
    )


def save_index(index: SpecIndex, path: Path | str) -> None:
    """Persist an index, replacing any index already at ``path``.

    Raises:
        SearchIndexError: If the index cannot be written.
    """
    _atomic_write(Path(path), orjson.dumps(_encode(index)))


def load_index(path: Path | str, *, expected_model: str | None = None) -> SpecIndex:
    """Load a persisted index.

    Args:
        path: Location of the index blob.
        expected_model: Model name the caller will query with. When given,
            an index built with another model is rejected.

    Returns:
        The loaded index.

    Raises:
        IndexUnavailableError: If the blob is missing, unreadable, or not a
            spox index.
        StaleIndexError: If the index was built with a different model than
            ``expected_model``.
    """
    index_path = Path(path)
    try:
        content = index_path.read_bytes()
    except FileNotFoundError as e:
        msg = f"No search index found at {index_path}; build the index first"
        raise IndexUnavailableError(msg, path=index_path, cause=e) from e
    except OSError as e:
        msg = f"Failed to read search index: {e}"
        raise IndexUnavailableError(msg, path=index_path, cause=e) from e

    try:
        data = orjson.loads(content)
    except orjson.JSONDecodeError as e:
        msg = f"Search index is corrupt: {e}"
        raise IndexUnavailableError(msg, path=index_path, cause=e) from e

    if not isinstance(data, dict) or data.get("format_version") != INDEX_FORMAT_VERSION:
        msg = f"Unsupported search index format at {index_path}"
        raise IndexUnavailableError(msg, path=index_path)

    try:
        index = _decode(data)
    except (KeyError, TypeError, ValueError) as e:
        msg = f"Search index is malformed: {e}"
        raise IndexUnavailableError(msg, path=index_path, cause=e) from e

    if expected_model is not None and index.model_name != expected_model:
        msg = (
            f"Search index was built with model '{index.model_name}', "
            f"not '{expected_model}'; rebuild the index"
        )
        raise StaleIndexError(msg, index_model=index.model_name, expected_model=expected_model)

    return index
