"""
In-memory ontology store and the repository adapter built on it.

A single InMemoryStore holds every ontology aggregate behind one lock. The
repository adapter here and the reasoner adapter in reasoner.py share the same
store instance, so each operation sees every previously committed mutation and
none ever observes a half-applied one.

The lock spans the whole map. Sharding it per ontology identifier would remove
most contention if throughput ever matters.
"""

import copy
import logging
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional

from .domain import (
    Ontology,
    OntologyClass,
    OntologyError,
    OntologyIndividual,
    OntologyProperty,
    require_instance,
)
from .errors import (
    DomainValidationError,
    OntologyAlreadyExistsError,
    OntologyNotFoundError,
    OntologyServiceError,
    SeedAccessError,
    StorePoisonedError,
)
from .iri import Iri, iri
from .repositories import OntologyRepository, OntologySnapshot, OntologySummary

logger = logging.getLogger(__name__)


class InMemoryStore:
    """Identifier-keyed map of ontologies guarded by a single mutual-exclusion lock."""

    def __init__(self):
        self._ontologies: Dict[Iri, Ontology] = {}
        self._lock = threading.Lock()
        self._poisoned = False

    @property
    def poisoned(self) -> bool:
        return self._poisoned

    @contextmanager
    def guard(self) -> Iterator[Dict[Iri, Ontology]]:
        """
        Hold the store lock for the duration of the block.

        Domain and service errors are ordinary results and pass through. Any
        other exception escaping the block poisons the store for good.

        Raises:
            StorePoisonedError: If an earlier operation poisoned the store
        """
        with self._lock:
            if self._poisoned:
                raise StorePoisonedError("in-memory ontology store poisoned")
            try:
                yield self._ontologies
            except (OntologyError, OntologyServiceError):
                raise
            except Exception:
                self._poisoned = True
                logger.critical("In-memory ontology store poisoned by an unexpected error", exc_info=True)
                raise


def validate_seed_path(path: Path) -> None:
    """
    Check that a configured seed path exists as a file or directory.

    Seed contents are not read here.

    Raises:
        SeedAccessError: If the path is missing, unreadable or of another type
    """
    path = Path(path)
    if path.exists():
        if path.is_file() or path.is_dir():
            return
        raise SeedAccessError(path, OSError("unsupported seed path type"))
    try:
        path.stat()
    except OSError as exc:
        raise SeedAccessError(path, exc) from exc


class InMemoryOntologyRepository(OntologyRepository):
    """OntologyRepository adapter over an InMemoryStore."""

    def __init__(self, store: InMemoryStore):
        self.store = store

    def preload(self, seeds: Iterable[Path]) -> None:
        """Validate configured seed paths; content loading is left to other backends."""
        for path in seeds:
            validate_seed_path(path)
            logger.debug(f"Validated ontology seed {path}")

    def insert(self, ontology: Ontology) -> None:
        require_instance(ontology, Ontology, "ontology")
        stored = copy.deepcopy(ontology)
        with self.store.guard() as ontologies:
            if stored.iri in ontologies:
                raise OntologyAlreadyExistsError(stored.iri)
            ontologies[stored.iri] = stored
        logger.debug(f"Inserted ontology {stored.iri}")

    def update(self, ontology: Ontology) -> None:
        require_instance(ontology, Ontology, "ontology")
        stored = copy.deepcopy(ontology)
        with self.store.guard() as ontologies:
            if stored.iri not in ontologies:
                raise OntologyNotFoundError(stored.iri)
            ontologies[stored.iri] = stored
        logger.debug(f"Updated ontology {stored.iri}")

    def get(self, ontology_iri) -> Optional[OntologySnapshot]:
        ontology_iri = iri(ontology_iri)
        with self.store.guard() as ontologies:
            ontology = ontologies.get(ontology_iri)
            if ontology is None:
                return None
            return OntologySnapshot(ontology=copy.deepcopy(ontology))

    def delete(self, ontology_iri) -> None:
        ontology_iri = iri(ontology_iri)
        with self.store.guard() as ontologies:
            if ontologies.pop(ontology_iri, None) is None:
                raise OntologyNotFoundError(ontology_iri)
        logger.debug(f"Deleted ontology {ontology_iri}")

    def list(self) -> List[OntologySummary]:
        with self.store.guard() as ontologies:
            return [OntologySummary.from_ontology(ontologies[key]) for key in sorted(ontologies)]

    def attach_class(self, ontology_iri, ontology_class: OntologyClass) -> None:
        ontology_iri = iri(ontology_iri)
        require_instance(ontology_class, OntologyClass, "ontology_class")
        candidate = copy.deepcopy(ontology_class)
        with self.store.guard() as ontologies:
            existing = self._existing(ontologies, ontology_iri)
            try:
                existing.add_class(candidate)
            except OntologyError as exc:
                raise DomainValidationError(exc) from exc
        logger.debug(f"Attached class {candidate.iri} to ontology {ontology_iri}")

    def attach_property(self, ontology_iri, ontology_property: OntologyProperty) -> None:
        ontology_iri = iri(ontology_iri)
        require_instance(ontology_property, OntologyProperty, "ontology_property")
        candidate = copy.deepcopy(ontology_property)
        with self.store.guard() as ontologies:
            existing = self._existing(ontologies, ontology_iri)
            try:
                existing.add_property(candidate)
            except OntologyError as exc:
                raise DomainValidationError(exc) from exc
        logger.debug(f"Attached property {candidate.iri} to ontology {ontology_iri}")

    def attach_individual(self, ontology_iri, individual: OntologyIndividual) -> None:
        ontology_iri = iri(ontology_iri)
        require_instance(individual, OntologyIndividual, "individual")
        candidate = copy.deepcopy(individual)
        with self.store.guard() as ontologies:
            existing = self._existing(ontologies, ontology_iri)
            try:
                existing.add_individual(candidate)
            except OntologyError as exc:
                raise DomainValidationError(exc) from exc
        logger.debug(f"Attached individual {candidate.iri} to ontology {ontology_iri}")

    @staticmethod
    def _existing(ontologies: Dict[Iri, Ontology], ontology_iri: Iri) -> Ontology:
        existing = ontologies.get(ontology_iri)
        if existing is None:
            raise OntologyNotFoundError(ontology_iri)
        return existing
