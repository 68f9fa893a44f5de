"""Specification corpus: parsing, validation, rendering, and archive merging."""

from spox.spec._change import (
    DESIGN_FILE,
    PROPOSAL_FILE,
    TASKS_FILE,
    delta_file,
    parse_change,
    parse_proposal,
    parse_tasks,
)
from spox.spec._delta import parse_delta
from spox.spec._merge import apply_delta, archive_change, empty_spec
from spox.spec._models import (
    ChangeProposal,
    Clause,
    DeltaSection,
    DeltaSet,
    RenamedRequirement,
    Requirement,
    Scenario,
    Spec,
    Task,
    TaskStats,
)
from spox.spec._parser import parse_spec
from spox.spec._render import render_spec
from spox.spec._validator import (
    SourceLocation,
    ValidationIssue,
    ValidationReport,
    validate_change,
    validate_delta,
    validate_spec,
    validate_tasks,
)

__all__ = [
    "DESIGN_FILE",
    "PROPOSAL_FILE",
    "TASKS_FILE",
    "ChangeProposal",
    "Clause",
    "DeltaSection",
    "DeltaSet",
    "RenamedRequirement",
    "Requirement",
    "Scenario",
    "SourceLocation",
    "Spec",
    "Task",
    "TaskStats",
    "ValidationIssue",
    "ValidationReport",
    "apply_delta",
    "archive_change",
    "delta_file",
    "empty_spec",
    "parse_change",
    "parse_delta",
    "parse_proposal",
    "parse_spec",
    "parse_tasks",
    "render_spec",
    "validate_change",
    "validate_delta",
    "validate_spec",
    "validate_tasks",
]
