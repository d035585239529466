"""
Ports describing the infrastructure the ontology module depends on.

OntologyRepository covers CRUD over Ontology aggregates and ReasoningQuery
covers read-only traversals of a stored ontology. Adapters implement both
against whatever backend they wrap, so callers never depend on storage details.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from .domain import Ontology, OntologyClass, OntologyIndividual, OntologyProperty
from .iri import Iri


@dataclass
class OntologySnapshot:
    """Detached copy of a stored ontology aggregate."""

    ontology: Ontology


@dataclass
class OntologySummary:
    """Lightweight listing entry; never carries the aggregate itself."""

    iri: Iri
    label: Optional[str]
    class_count: int
    property_count: int
    individual_count: int

    @classmethod
    def from_ontology(cls, ontology: Ontology) -> 'OntologySummary':
        return cls(
            iri=ontology.iri,
            label=ontology.label,
            class_count=ontology.class_count,
            property_count=ontology.property_count,
            individual_count=ontology.individual_count,
        )


class OntologyRepository(ABC):
    """Contract for persisting ontology aggregates."""

    @abstractmethod
    def insert(self, ontology: Ontology) -> None:
        """
        Persist a brand new ontology.

        Args:
            ontology: Aggregate to store

        Raises:
            OntologyAlreadyExistsError: If the identifier is already stored
        """
        pass

    @abstractmethod
    def update(self, ontology: Ontology) -> None:
        """
        Replace an existing ontology aggregate.

        Raises:
            OntologyNotFoundError: If the identifier is not stored
        """
        pass

    @abstractmethod
    def get(self, ontology_iri: Iri) -> Optional[OntologySnapshot]:
        """
        Retrieve a stored ontology.

        Returns:
            Snapshot of the aggregate, or None when it does not exist
        """
        pass

    @abstractmethod
    def delete(self, ontology_iri: Iri) -> None:
        """
        Delete an ontology together with all nested entities.

        Raises:
            OntologyNotFoundError: If the identifier is not stored
        """
        pass

    @abstractmethod
    def list(self) -> List[OntologySummary]:
        """List all ontologies ordered by identifier, without loading the aggregates."""
        pass

    @abstractmethod
    def attach_class(self, ontology_iri: Iri, ontology_class: OntologyClass) -> None:
        """
        Append a class to an existing ontology.

        The class is validated by the aggregate; a rejected class leaves the
        stored ontology unchanged.
        """
        pass

    @abstractmethod
    def attach_property(self, ontology_iri: Iri, ontology_property: OntologyProperty) -> None:
        """Append a property to an existing ontology."""
        pass

    @abstractmethod
    def attach_individual(self, ontology_iri: Iri, individual: OntologyIndividual) -> None:
        """Append an individual to an existing ontology."""
        pass


class ReasoningQuery(ABC):
    """Contract for read-only reasoning and traversal over a stored ontology."""

    @abstractmethod
    def ancestors_of(self, ontology_iri: Iri, class_iri: Iri) -> List[Iri]:
        """Return the transitive closure of the parent classes of a class."""
        pass

    @abstractmethod
    def descendants_of(self, ontology_iri: Iri, class_iri: Iri) -> List[Iri]:
        """Return the classes which directly declare the given class as a parent."""
        pass

    @abstractmethod
    def related_individuals(self, ontology_iri: Iri, property_iri: Iri,
                            individual_iri: Iri) -> List[Iri]:
        """Return individuals linked from the source individual via an object property."""
        pass

    @abstractmethod
    def shortest_path(self, ontology_iri: Iri, start: Iri, end: Iri) -> Optional[List[Iri]]:
        """
        Find the shortest chain of object property assertions between two individuals.

        Returns:
            Path including both endpoints, or None when end is unreachable
        """
        pass
