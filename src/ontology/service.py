"""
High-level ontology service wiring repository and reasoner adapters together.

This is the entry point for other modules: obtain a service, then request a
repository handle to mutate ontologies and a reasoner handle to query them.
Both handles share one store, so queries always see the latest mutation.
"""

import logging
from typing import Optional

from rdflib import Graph

from .config import OntologyBackend, OntologySettings, ReasonerBackend, ReasonerSettings, Settings
from .errors import OntologyNotFoundError
from .iri import iri
from .rdf import ontology_to_graph
from .reasoner import InMemoryReasoner
from .repositories import OntologyRepository, ReasoningQuery
from .store import InMemoryOntologyRepository, InMemoryStore

logger = logging.getLogger(__name__)


class OntologyService:
    """Facade exposing shared repository and reasoner handles."""

    def __init__(self,
                 repository: Optional[OntologyRepository] = None,
                 reasoner: Optional[ReasoningQuery] = None,
                 reasoner_settings: Optional[ReasonerSettings] = None):
        """
        Initialize the ontology service.

        Args:
            repository: Repository adapter. If both adapters are None, an
                in-memory pair sharing one store is created.
            reasoner: Reasoner adapter working on the same data as repository
            reasoner_settings: Active reasoner settings. Defaults enable everything
                for a new in-memory pair. An injected InMemoryReasoner supplies its
                own; any other injected reasoner requires them explicitly.
        """
        if repository is None and reasoner is None:
            if reasoner_settings is None:
                reasoner_settings = ReasonerSettings()
            store = InMemoryStore()
            repository = InMemoryOntologyRepository(store)
            reasoner = InMemoryReasoner(store, reasoner_settings)
        elif repository is None or reasoner is None:
            raise ValueError("repository and reasoner must be provided together")
        elif reasoner_settings is None:
            if not isinstance(reasoner, InMemoryReasoner):
                raise ValueError("reasoner_settings are required for a custom reasoner")
            reasoner_settings = reasoner.settings

        self._reasoner_settings = reasoner_settings
        self._repository = repository
        self._reasoner = reasoner

    @classmethod
    def from_config(cls, ontology: OntologySettings, reasoner: ReasonerSettings) -> 'OntologyService':
        """
        Build the service from configuration settings.

        Raises:
            SeedAccessError: If a configured seed path cannot be accessed
        """
        if ontology.backend is OntologyBackend.IN_MEMORY:
            store = InMemoryStore()
        else:
            raise ValueError(f"Unsupported ontology backend: {ontology.backend}")

        repository = InMemoryOntologyRepository(store)
        repository.preload(ontology.seeds)

        if reasoner.backend is ReasonerBackend.NATIVE:
            reasoner_adapter = InMemoryReasoner(store, reasoner)
        else:
            raise ValueError(f"Unsupported reasoner backend: {reasoner.backend}")

        logger.info(
            f"Ontology service ready (backend={ontology.backend.value}, "
            f"reasoner={reasoner.backend.value}, seeds={len(ontology.seeds)})"
        )
        return cls(repository, reasoner_adapter, reasoner)

    @classmethod
    def from_settings(cls, settings: Settings) -> 'OntologyService':
        return cls.from_config(settings.ontology, settings.reasoner)

    @classmethod
    def from_env(cls) -> 'OntologyService':
        """Build the service from environment variables (and a .env file, if present)."""
        return cls.from_settings(Settings.from_env())

    def repository(self) -> OntologyRepository:
        """Return the shared repository handle."""
        return self._repository

    def reasoner(self) -> ReasoningQuery:
        """Return the shared reasoner handle."""
        return self._reasoner

    @property
    def reasoner_settings(self) -> ReasonerSettings:
        return self._reasoner_settings

    def export_graph(self, ontology_iri) -> Graph:
        """
        Export a stored ontology as an RDF graph.

        Raises:
            OntologyNotFoundError: If the ontology does not exist
        """
        ontology_iri = iri(ontology_iri)
        snapshot = self._repository.get(ontology_iri)
        if snapshot is None:
            raise OntologyNotFoundError(ontology_iri)
        return ontology_to_graph(snapshot.ontology)
