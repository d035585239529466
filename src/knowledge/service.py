"""
Knowledge orchestration: run a reasoning plan, then ask an assistant.

The orchestrator depends only on the ReasoningQuery port of the ontology
module and on the KnowledgeAssistant port defined here. Concrete assistant
adapters (language model providers) live outside this package.
"""

import logging
from abc import ABC, abstractmethod
from typing import Iterable, List

from ontology.iri import Iri, iri
from ontology.repositories import ReasoningQuery

from .domain import (
    AncestorsCommand,
    AncestorsOutcome,
    DescendantsCommand,
    DescendantsOutcome,
    KnowledgeRequest,
    KnowledgeResponse,
    KnowledgeSynthesis,
    ReasoningCommand,
    ReasoningOutcome,
    RelatedIndividualsCommand,
    RelatedIndividualsOutcome,
    ShortestPathCommand,
    ShortestPathOutcome,
)

logger = logging.getLogger(__name__)


class KnowledgeAssistantError(Exception):
    """Raised by assistant adapters when a response cannot be produced."""


class KnowledgeAssistant(ABC):
    """Port implemented by providers that turn reasoning context into an answer."""

    @abstractmethod
    def respond(self, request: KnowledgeRequest) -> KnowledgeResponse:
        """
        Produce a natural language answer for the request.

        Raises:
            KnowledgeAssistantError: If the provider fails or returns nothing usable
        """
        pass


def execute_command(reasoner: ReasoningQuery, ontology_iri: Iri, command: ReasoningCommand) -> ReasoningOutcome:
    """Run one reasoning command and wrap the result in its outcome type."""
    if isinstance(command, AncestorsCommand):
        return AncestorsOutcome(
            class_iri=command.class_iri,
            ancestors=reasoner.ancestors_of(ontology_iri, command.class_iri),
        )
    if isinstance(command, DescendantsCommand):
        return DescendantsOutcome(
            class_iri=command.class_iri,
            descendants=reasoner.descendants_of(ontology_iri, command.class_iri),
        )
    if isinstance(command, RelatedIndividualsCommand):
        return RelatedIndividualsOutcome(
            property_iri=command.property_iri,
            individual_iri=command.individual_iri,
            related=reasoner.related_individuals(ontology_iri, command.property_iri, command.individual_iri),
        )
    if isinstance(command, ShortestPathCommand):
        return ShortestPathOutcome(
            start=command.start,
            end=command.end,
            path=reasoner.shortest_path(ontology_iri, command.start, command.end),
        )
    raise TypeError(f"Unsupported reasoning command: {command!r}")


class KnowledgeOrchestrator:
    """Executes reasoning plans before delegating to a knowledge assistant."""

    def __init__(self, reasoner: ReasoningQuery, assistant: KnowledgeAssistant):
        self.reasoner = reasoner
        self.assistant = assistant

    def run(self, ontology_iri, prompt: str, plan: Iterable[ReasoningCommand]) -> KnowledgeSynthesis:
        """
        Execute the plan in order, then invoke the assistant once.

        Args:
            ontology_iri: Ontology the plan is evaluated against
            prompt: User prompt forwarded to the assistant
            plan: Reasoning commands, e.g. from build_plan()

        Returns:
            KnowledgeSynthesis with the assistant message and all outcomes

        Raises:
            OntologyServiceError: Propagated unchanged from the reasoner
            KnowledgeAssistantError: If the assistant fails
        """
        ontology_iri = iri(ontology_iri)
        inferences: List[ReasoningOutcome] = [
            execute_command(self.reasoner, ontology_iri, command) for command in plan
        ]
        logger.debug(f"Executed {len(inferences)} reasoning commands against {ontology_iri}")

        request = KnowledgeRequest(prompt=prompt, ontology=ontology_iri, inferences=list(inferences))
        response = self.assistant.respond(request)
        if response is None or not response.message:
            raise KnowledgeAssistantError("provider returned an unexpected response")

        return KnowledgeSynthesis(message=response.message, inferences=inferences)
