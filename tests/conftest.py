"""Shared test fixtures for spox tests."""

from collections.abc import Callable
from textwrap import dedent

import pytest

SpecTextFactory = Callable[..., str]

AUTH_PURPOSE = (
    "Describe how users prove their identity before they can reach any "
    "protected part of the application."
)


def spec_document(
    title: str = "Auth",
    *,
    purpose: str | None = AUTH_PURPOSE,
    requirements: str | None = "",
) -> str:
    """Build a spec document from a title, purpose text and requirement blocks.

    Args:
        title: Title placed in the H1, before " Specification".
        purpose: Purpose body; None omits the ``## Purpose`` section.
        requirements: Raw requirement blocks; None omits ``## Requirements``.
    """
    parts = [f"# {title} Specification", ""]
    if purpose is not None:
        parts += ["## Purpose", "", purpose, ""]
    if requirements is not None:
        parts += ["## Requirements", ""]
        if requirements:
            parts.append(dedent(requirements).strip())
            parts.append("")
    return "\n".join(parts)


def requirement_block(
    name: str,
    description: str = "The system SHALL do the thing.",
    *,
    scenarios: tuple[tuple[str, tuple[str, ...]], ...] = (
        ("Happy path", ("**WHEN** a user acts", "**THEN** the system responds")),
    ),
) -> str:
    """Build a ``### Requirement:`` block with its scenarios."""
    lines = [f"### Requirement: {name}"]
    if description:
        lines += ["", description]
    for scenario_name, clauses in scenarios:
        lines += ["", f"#### Scenario: {scenario_name}"]
        lines += [f"- {clause}" for clause in clauses]
    return "\n".join(lines)


@pytest.fixture
def make_spec_text() -> SpecTextFactory:
    return spec_document


@pytest.fixture
def make_requirement_text() -> Callable[..., str]:
    return requirement_block
