"""
Knowledge Orchestration Module

Turns a plan of reasoning commands into ontology inferences and hands them,
together with the user prompt, to a knowledge assistant.

Public Interface:
- KnowledgeOrchestrator: Runs a plan against a reasoner, then the assistant
- KnowledgeAssistant: Port for assistant providers
- build_plan: Converts tagged step mappings into commands
"""

from .domain import (
    AncestorsCommand,
    DescendantsCommand,
    KnowledgeRequest,
    KnowledgeResponse,
    KnowledgeSynthesis,
    RelatedIndividualsCommand,
    ShortestPathCommand,
    build_plan,
)
from .service import KnowledgeAssistant, KnowledgeAssistantError, KnowledgeOrchestrator

__all__ = [
    "KnowledgeOrchestrator",
    "KnowledgeAssistant",
    "KnowledgeAssistantError",
    "KnowledgeRequest",
    "KnowledgeResponse",
    "KnowledgeSynthesis",
    "AncestorsCommand",
    "DescendantsCommand",
    "RelatedIndividualsCommand",
    "ShortestPathCommand",
    "build_plan",
]
