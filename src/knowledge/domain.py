"""
Domain models for reasoning plans and knowledge synthesis.

A plan is a list of reasoning commands. Each command produces exactly one
outcome of the matching type, and outcomes can describe themselves as text
for an assistant prompt.
"""

from dataclasses import dataclass, field
from typing import Annotated, Any, Iterable, List, Literal, Mapping, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter

from ontology.iri import Iri, iri


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AncestorsCommand:
    """Fetch the transitive closure of parent classes."""
    class_iri: Iri


@dataclass(frozen=True)
class DescendantsCommand:
    """Fetch the direct subclasses of a class."""
    class_iri: Iri


@dataclass(frozen=True)
class RelatedIndividualsCommand:
    """Retrieve individuals connected through a property."""
    property_iri: Iri
    individual_iri: Iri


@dataclass(frozen=True)
class ShortestPathCommand:
    """Compute the shortest path between two individuals."""
    start: Iri
    end: Iri


ReasoningCommand = Union[AncestorsCommand, DescendantsCommand, RelatedIndividualsCommand, ShortestPathCommand]


# ---------------------------------------------------------------------------
# Outcomes
# ---------------------------------------------------------------------------

def _bullet_list(header: str, items: Iterable[Iri]) -> str:
    return header + "".join(f"\n  - {item}" for item in items)


@dataclass(frozen=True)
class AncestorsOutcome:
    class_iri: Iri
    ancestors: List[Iri]

    kind = "ancestors"

    def describe(self) -> str:
        return _bullet_list(
            f"Ancestors of class `{self.class_iri}` ({len(self.ancestors)} items):", self.ancestors
        )


@dataclass(frozen=True)
class DescendantsOutcome:
    class_iri: Iri
    descendants: List[Iri]

    kind = "descendants"

    def describe(self) -> str:
        return _bullet_list(
            f"Descendants of class `{self.class_iri}` ({len(self.descendants)} items):", self.descendants
        )


@dataclass(frozen=True)
class RelatedIndividualsOutcome:
    property_iri: Iri
    individual_iri: Iri
    related: List[Iri]

    kind = "related-individuals"

    def describe(self) -> str:
        return _bullet_list(
            f"Individuals related to `{self.individual_iri}` via `{self.property_iri}` "
            f"({len(self.related)} items):",
            self.related,
        )


@dataclass(frozen=True)
class ShortestPathOutcome:
    start: Iri
    end: Iri
    path: Optional[List[Iri]]

    kind = "shortest-path"

    def describe(self) -> str:
        if self.path is None:
            return f"No path discovered between `{self.start}` and `{self.end}`."
        return _bullet_list(
            f"Shortest path between `{self.start}` and `{self.end}` ({len(self.path)} hops):", self.path
        )


ReasoningOutcome = Union[AncestorsOutcome, DescendantsOutcome, RelatedIndividualsOutcome, ShortestPathOutcome]


# ---------------------------------------------------------------------------
# Plan steps (tagged mappings, e.g. from a JSON request body)
# ---------------------------------------------------------------------------

class AncestorsStep(BaseModel):
    type: Literal["ancestors"] = "ancestors"
    class_: str = Field(..., alias="class", description="IRI of the class")

    def to_command(self) -> AncestorsCommand:
        return AncestorsCommand(class_iri=iri(self.class_))


class DescendantsStep(BaseModel):
    type: Literal["descendants"] = "descendants"
    class_: str = Field(..., alias="class", description="IRI of the class")

    def to_command(self) -> DescendantsCommand:
        return DescendantsCommand(class_iri=iri(self.class_))


class RelatedIndividualsStep(BaseModel):
    type: Literal["related-individuals"] = "related-individuals"
    property: str = Field(..., description="IRI of the object property")
    individual: str = Field(..., description="IRI of the source individual")

    def to_command(self) -> RelatedIndividualsCommand:
        return RelatedIndividualsCommand(property_iri=iri(self.property), individual_iri=iri(self.individual))


class ShortestPathStep(BaseModel):
    type: Literal["shortest-path"] = "shortest-path"
    start: str = Field(..., description="IRI of the start individual")
    end: str = Field(..., description="IRI of the end individual")

    def to_command(self) -> ShortestPathCommand:
        return ShortestPathCommand(start=iri(self.start), end=iri(self.end))


ReasoningStep = Annotated[
    Union[AncestorsStep, DescendantsStep, RelatedIndividualsStep, ShortestPathStep],
    Field(discriminator="type"),
]

_plan_adapter = TypeAdapter(List[ReasoningStep])


def build_plan(steps: Iterable[Mapping[str, Any]]) -> List[ReasoningCommand]:
    """
    Convert tagged step mappings into reasoning commands.

    Raises:
        pydantic.ValidationError: If a step has an unknown type or misses a field
        InvalidIriError: If a step carries an invalid IRI
    """
    return [step.to_command() for step in _plan_adapter.validate_python(list(steps))]


# ---------------------------------------------------------------------------
# Assistant exchange
# ---------------------------------------------------------------------------

@dataclass
class KnowledgeRequest:
    """Prompt plus the reasoning context handed to an assistant."""

    prompt: str
    ontology: Iri
    inferences: List[ReasoningOutcome] = field(default_factory=list)

    def context_as_text(self) -> str:
        if not self.inferences:
            return "No ontology inferences were requested."
        return "\n\n".join(inference.describe() for inference in self.inferences)


@dataclass
class KnowledgeResponse:
    message: str


@dataclass
class KnowledgeSynthesis:
    """Assistant message together with the reasoning outcomes it was based on."""

    message: str
    inferences: List[ReasoningOutcome] = field(default_factory=list)
