"""
Unit test for reasoning plan models.

HOW TO RUN:
The virtual environment .venv should be activated before running the tests.

From the project root, run:
    pytest src/knowledge/test_domain.py
"""

import pytest
from pydantic import ValidationError

from ontology.iri import InvalidIriError, Iri

from .domain import (
    AncestorsCommand,
    AncestorsOutcome,
    DescendantsCommand,
    DescendantsOutcome,
    KnowledgeRequest,
    RelatedIndividualsCommand,
    RelatedIndividualsOutcome,
    ShortestPathCommand,
    ShortestPathOutcome,
    build_plan,
)

EX = "https://example.org/"


def test_build_plan_from_tagged_steps():
    """Test conversion of tagged step mappings to commands."""
    print("Testing build_plan...")

    plan = build_plan([
        {"type": "ancestors", "class": EX + "Derived"},
        {"type": "descendants", "class": EX + "Base"},
        {"type": "related-individuals", "property": EX + "link", "individual": EX + "alice"},
        {"type": "shortest-path", "start": EX + "alice", "end": EX + "bob"},
    ])

    assert plan == [
        AncestorsCommand(class_iri=Iri(EX + "Derived")),
        DescendantsCommand(class_iri=Iri(EX + "Base")),
        RelatedIndividualsCommand(property_iri=Iri(EX + "link"), individual_iri=Iri(EX + "alice")),
        ShortestPathCommand(start=Iri(EX + "alice"), end=Iri(EX + "bob")),
    ]
    assert build_plan([]) == []

    print("✓ build_plan working correctly")


@pytest.mark.parametrize("step", [
    {"type": "siblings", "class": EX + "Base"},
    {"type": "ancestors"},
    {"type": "shortest-path", "start": EX + "alice"},
    {"class": EX + "Base"},
])
def test_build_plan_rejects_malformed_steps(step):
    with pytest.raises(ValidationError):
        build_plan([step])


def test_build_plan_rejects_invalid_iris():
    with pytest.raises(InvalidIriError):
        build_plan([{"type": "descendants", "class": "not an iri"}])


def test_outcome_descriptions():
    base, derived = Iri(EX + "Base"), Iri(EX + "Derived")
    alice, bob = Iri(EX + "alice"), Iri(EX + "bob")

    assert AncestorsOutcome(class_iri=derived, ancestors=[base]).describe() == (
        f"Ancestors of class `{derived}` (1 items):\n  - {base}"
    )
    assert DescendantsOutcome(class_iri=derived, descendants=[]).describe() == (
        f"Descendants of class `{derived}` (0 items):"
    )
    assert RelatedIndividualsOutcome(property_iri=Iri(EX + "link"), individual_iri=alice,
                                     related=[bob]).describe() == (
        f"Individuals related to `{alice}` via `{EX}link` (1 items):\n  - {bob}"
    )
    assert ShortestPathOutcome(start=alice, end=bob, path=[alice, bob]).describe() == (
        f"Shortest path between `{alice}` and `{bob}` (2 hops):\n  - {alice}\n  - {bob}"
    )
    assert ShortestPathOutcome(start=alice, end=bob, path=None).describe() == (
        f"No path discovered between `{alice}` and `{bob}`."
    )


def test_outcome_kinds():
    assert AncestorsOutcome.kind == "ancestors"
    assert DescendantsOutcome.kind == "descendants"
    assert RelatedIndividualsOutcome.kind == "related-individuals"
    assert ShortestPathOutcome.kind == "shortest-path"


def test_request_context_text():
    ontology = Iri(EX + "onto")
    assert KnowledgeRequest(prompt="?", ontology=ontology).context_as_text() == (
        "No ontology inferences were requested."
    )

    request = KnowledgeRequest(prompt="?", ontology=ontology, inferences=[
        DescendantsOutcome(class_iri=Iri(EX + "A"), descendants=[]),
        DescendantsOutcome(class_iri=Iri(EX + "B"), descendants=[]),
    ])
    assert request.context_as_text() == (
        f"Descendants of class `{EX}A` (0 items):\n\nDescendants of class `{EX}B` (0 items):"
    )
