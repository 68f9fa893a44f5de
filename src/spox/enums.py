"""Enumeration types for spox."""

from enum import StrEnum


class ClauseKeyword(StrEnum):
    """Bolded lead-in words recognized in scenario bullets."""

    WHEN = "WHEN"
    THEN = "THEN"
    AND = "AND"


class ClauseRole(StrEnum):
    """Role a scenario clause plays.

    ``AND`` clauses have no role of their own and inherit the role of the
    nearest preceding ``WHEN`` or ``THEN`` clause.
    """

    PRECONDITION = "precondition"
    OUTCOME = "outcome"


class DeltaOperation(StrEnum):
    """Delta buckets, in the order they are applied when archiving."""

    ADDED = "ADDED"
    RENAMED = "RENAMED"
    MODIFIED = "MODIFIED"
    REMOVED = "REMOVED"


class Severity(StrEnum):
    """Validation issue severity."""

    ERROR = "error"
    WARNING = "warning"


class IssueCode(StrEnum):
    """Stable categories for validation issues."""

    # Spec structure
    MISSING_PURPOSE = "MissingPurpose"
    PURPOSE_TOO_SHORT = "PurposeTooShort"
    MISSING_REQUIREMENTS = "MissingRequirements"
    NO_REQUIREMENTS = "NoRequirements"
    DUPLICATE_REQUIREMENT = "DuplicateRequirement"
    REQUIREMENT_MISSING_DESCRIPTION = "RequirementMissingDescription"
    MISSING_NORMATIVE_LANGUAGE = "MissingNormativeLanguage"
    REQUIREMENT_MISSING_SCENARIOS = "RequirementMissingScenarios"
    SCENARIO_MISSING_WHEN = "ScenarioMissingWhen"
    SCENARIO_MISSING_THEN = "ScenarioMissingThen"
    SCENARIO_CLAUSE_ORDER = "ScenarioClauseOrder"

    # Proposal and tasks
    MISSING_WHY = "MissingWhy"
    WHY_TOO_SHORT = "WhyTooShort"
    MISSING_WHAT_CHANGES = "MissingWhatChanges"
    MISSING_TASKS = "MissingTasks"
    UNNUMBERED_TASK = "UnnumberedTask"

    # Deltas
    NO_DELTAS = "NoDeltas"
    INVALID_DELTA_HEADER = "InvalidDeltaHeader"
    REPEATED_DELTA_HEADER = "RepeatedDeltaHeader"
    MODIFIED_INCOMPLETE = "ModifiedIncomplete"
    RENAME_MISSING_TARGET = "RenameMissingTarget"
    EMPTY_REQUIREMENT_NAME = "EmptyRequirementName"
    DUPLICATE_DELTA_ENTRY = "DuplicateDeltaEntry"


class ConflictKind(StrEnum):
    """Archive merge rules a delta can violate."""

    DUPLICATE_NAME = "DuplicateName"
    UNKNOWN_REQUIREMENT = "UnknownRequirement"
    EMPTY_NAME = "EmptyName"
