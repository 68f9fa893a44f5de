from collections.abc import Callable

import pytest

from spox.enums import ClauseKeyword, ClauseRole
from spox.spec import Clause, DeltaSet, Requirement, Scenario, Spec


@pytest.fixture
def make_scenario() -> Callable[..., Scenario]:
    def _make(**overrides: object) -> Scenario:
        defaults: dict[str, object] = {
            "name": "Happy path",
            "clauses": (
                Clause(ClauseRole.PRECONDITION, ClauseKeyword.WHEN, "a user acts"),
                Clause(ClauseRole.OUTCOME, ClauseKeyword.THEN, "the system responds"),
            ),
        }
        defaults.update(overrides)
        return Scenario(**defaults)  # pyright: ignore[reportArgumentType]

    return _make


@pytest.fixture
def make_requirement(
    make_scenario: Callable[..., Scenario],
) -> Callable[..., Requirement]:
    def _make(name: str = "Login", **overrides: object) -> Requirement:
        defaults: dict[str, object] = {
            "name": name,
            "description": f"The system SHALL support {name.lower()}.",
            "scenarios": (make_scenario(),),
        }
        defaults.update(overrides)
        return Requirement(**defaults)  # pyright: ignore[reportArgumentType]

    return _make


@pytest.fixture
def make_spec(
    make_requirement: Callable[..., Requirement],
) -> Callable[..., Spec]:
    def _make(*names: str, **overrides: object) -> Spec:
        defaults: dict[str, object] = {
            "id": "auth",
            "title": "Auth",
            "purpose": "Describe how users prove their identity to the application.",
            "requirements": tuple(make_requirement(name) for name in names),
        }
        defaults.update(overrides)
        return Spec(**defaults)  # pyright: ignore[reportArgumentType]

    return _make


@pytest.fixture
def make_delta() -> Callable[..., DeltaSet]:
    def _make(**overrides: object) -> DeltaSet:
        defaults: dict[str, object] = {"capability_id": "auth"}
        defaults.update(overrides)
        return DeltaSet(**defaults)  # pyright: ignore[reportArgumentType]

    return _make
