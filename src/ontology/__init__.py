"""
Ontology Store & Reasoning Module

This module provides an in-memory ontology store (classes, properties and
individuals grouped into Ontology aggregates) and a reasoner answering
structural queries over it: class ancestors and descendants, individuals
related through a property, and shortest paths between individuals.

Public Interface:
- OntologyService: Facade handing out repository and reasoner handles
- Settings: Configuration of backends, seeds and inference toggles
- Domain models: Ontology, OntologyClass, OntologyProperty, OntologyIndividual, ...
- Iri: Validated identifier used as the key of every entity

Private Components:
- InMemoryStore with its repository and reasoner adapters
"""

from .config import InferenceSettings, OntologySettings, ReasonerSettings, Settings
from .domain import (
    IndividualAssertion,
    LiteralAssertion,
    Ontology,
    OntologyClass,
    OntologyError,
    OntologyIndividual,
    OntologyProperty,
    PropertyKind,
)
from .errors import OntologyServiceError
from .iri import InvalidIriError, Iri
from .repositories import OntologyRepository, OntologySnapshot, OntologySummary, ReasoningQuery
from .service import OntologyService

__all__ = [
    "OntologyService",
    "Settings",
    "OntologySettings",
    "ReasonerSettings",
    "InferenceSettings",
    "Ontology",
    "OntologyClass",
    "OntologyProperty",
    "OntologyIndividual",
    "PropertyKind",
    "IndividualAssertion",
    "LiteralAssertion",
    "OntologyError",
    "OntologyServiceError",
    "Iri",
    "InvalidIriError",
    "OntologyRepository",
    "ReasoningQuery",
    "OntologySnapshot",
    "OntologySummary",
]
