"""
Errors raised by ontology infrastructure components (store, adapters, service).

Aggregate invariant violations live in domain.py and reach callers wrapped in
DomainValidationError.
"""

from pathlib import Path

from .domain import OntologyError
from .iri import Iri


class OntologyServiceError(Exception):
    """Base class for recoverable errors reported by adapters and the service."""


class OntologyAlreadyExistsError(OntologyServiceError):
    def __init__(self, ontology: Iri):
        self.ontology = ontology
        super().__init__(f"ontology `{ontology}` already exists")


class OntologyNotFoundError(OntologyServiceError):
    def __init__(self, ontology: Iri):
        self.ontology = ontology
        super().__init__(f"ontology `{ontology}` missing")


class ClassNotFoundError(OntologyServiceError):
    def __init__(self, ontology: Iri, class_iri: Iri):
        self.ontology = ontology
        self.class_iri = class_iri
        super().__init__(f"class `{class_iri}` missing in ontology `{ontology}`")


class PropertyNotFoundError(OntologyServiceError):
    def __init__(self, ontology: Iri, property_iri: Iri):
        self.ontology = ontology
        self.property_iri = property_iri
        super().__init__(f"property `{property_iri}` missing in ontology `{ontology}`")


class IndividualNotFoundError(OntologyServiceError):
    def __init__(self, ontology: Iri, individual_iri: Iri):
        self.ontology = ontology
        self.individual_iri = individual_iri
        super().__init__(f"individual `{individual_iri}` missing in ontology `{ontology}`")


class PropertyKindError(OntologyServiceError):
    """A query needed an object property but was given a data property."""

    def __init__(self, ontology: Iri, property_iri: Iri):
        self.ontology = ontology
        self.property_iri = property_iri
        super().__init__(f"property `{property_iri}` in ontology `{ontology}` is not an object property")


class DomainValidationError(OntologyServiceError):
    """An aggregate mutation was rejected; the original error is kept in `error`."""

    def __init__(self, error: OntologyError):
        self.error = error
        super().__init__(f"domain error: {error}")


class SeedAccessError(OntologyServiceError):
    def __init__(self, path: Path, source: OSError):
        self.path = path
        self.source = source
        super().__init__(f"failed to access ontology seed `{path}`: {source}")


class StorePoisonedError(RuntimeError):
    """
    The in-memory store saw an unexpected exception while its lock was held.

    The stored state can no longer be trusted, so every later access fails.
    """
