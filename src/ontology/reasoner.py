"""
Native in-memory reasoner.

Implements the ReasoningQuery port over the shared InMemoryStore. Every query
holds the store lock for its whole traversal, so it works on one consistent
state of the ontology. The traversal helpers are plain functions over an
Ontology aggregate and never touch the store themselves.
"""

import logging
from collections import deque
from typing import Deque, Dict, List, Optional, Set, Tuple

from .config import ReasonerSettings
from .domain import IndividualAssertion, Ontology, OntologyClass
from .errors import (
    ClassNotFoundError,
    IndividualNotFoundError,
    OntologyNotFoundError,
    PropertyKindError,
    PropertyNotFoundError,
)
from .iri import Iri, iri
from .repositories import ReasoningQuery
from .store import InMemoryStore

logger = logging.getLogger(__name__)


def collect_ancestors(ontology: Ontology, start: OntologyClass) -> List[Iri]:
    """
    Transitive closure of the parent relation, starting from the declared parents of `start`.

    Parents missing from the ontology are reported but not expanded. The
    visited set guarantees termination on cyclic hierarchies.
    """
    visited: Set[Iri] = set()
    to_visit: Deque[Iri] = deque(start.parents)

    while to_visit:
        current = to_visit.popleft()
        if current in visited:
            continue
        visited.add(current)
        parent = ontology.get_class(current)
        if parent is not None:
            to_visit.extend(parent.parents)

    return sorted(visited)


def direct_descendants(ontology: Ontology, class_iri: Iri) -> List[Iri]:
    """Classes whose own parent set contains `class_iri` (one hop only)."""
    return [candidate.iri for candidate in ontology.classes if class_iri in candidate.parent_classes]


def object_neighbours(ontology: Ontology, individual_iri: Iri) -> List[Iri]:
    """Individuals targeted from `individual_iri` through any object property, sorted."""
    individual = ontology.get_individual(individual_iri)
    if individual is None:
        return []

    targets: Set[Iri] = set()
    for property_iri, assertions in individual.property_assertions.items():
        ontology_property = ontology.get_property(property_iri)
        if ontology_property is None or not ontology_property.is_object_property:
            continue
        for assertion in assertions:
            if isinstance(assertion, IndividualAssertion):
                targets.add(assertion.target)
    return sorted(targets)


def find_shortest_path(ontology: Ontology, start: Iri, end: Iri) -> Optional[List[Iri]]:
    """
    Breadth-first search over object property assertions.

    Neighbours are expanded in identifier order, so among several paths of
    minimal length the lexically first one found wins.
    """
    visited: Set[Iri] = {start}
    queue: Deque[Tuple[Iri, List[Iri]]] = deque([(start, [start])])

    while queue:
        current, path = queue.popleft()
        if current == end:
            return path
        for neighbour in object_neighbours(ontology, current):
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append((neighbour, path + [neighbour]))

    return None


class InMemoryReasoner(ReasoningQuery):
    """ReasoningQuery adapter over an InMemoryStore, gated by inference toggles."""

    def __init__(self, store: InMemoryStore, settings: Optional[ReasonerSettings] = None):
        self.store = store
        self.settings = settings if settings is not None else ReasonerSettings()

    def ancestors_of(self, ontology_iri, class_iri) -> List[Iri]:
        if not self.settings.inference.class_hierarchy:
            logger.warning("Class hierarchy inference disabled; ancestors_of returns no results")
            return []
        ontology_iri, class_iri = iri(ontology_iri), iri(class_iri)

        with self.store.guard() as ontologies:
            ontology = _get_ontology(ontologies, ontology_iri)
            start = ontology.get_class(class_iri)
            if start is None:
                raise ClassNotFoundError(ontology_iri, class_iri)
            ancestors = collect_ancestors(ontology, start)

        logger.debug(f"ancestors_of {class_iri} in {ontology_iri}: {len(ancestors)} classes")
        return ancestors

    def descendants_of(self, ontology_iri, class_iri) -> List[Iri]:
        if not self.settings.inference.class_hierarchy:
            logger.warning("Class hierarchy inference disabled; descendants_of returns no results")
            return []
        ontology_iri, class_iri = iri(ontology_iri), iri(class_iri)

        with self.store.guard() as ontologies:
            ontology = _get_ontology(ontologies, ontology_iri)
            if ontology.get_class(class_iri) is None:
                raise ClassNotFoundError(ontology_iri, class_iri)
            descendants = direct_descendants(ontology, class_iri)

        logger.debug(f"descendants_of {class_iri} in {ontology_iri}: {len(descendants)} classes")
        return descendants

    def related_individuals(self, ontology_iri, property_iri, individual_iri) -> List[Iri]:
        if not self.settings.inference.property_assertions:
            logger.warning("Property assertion inference disabled; related_individuals returns no results")
            return []
        ontology_iri, property_iri, individual_iri = iri(ontology_iri), iri(property_iri), iri(individual_iri)

        with self.store.guard() as ontologies:
            ontology = _get_ontology(ontologies, ontology_iri)
            ontology_property = ontology.get_property(property_iri)
            if ontology_property is None:
                raise PropertyNotFoundError(ontology_iri, property_iri)
            individual = ontology.get_individual(individual_iri)
            if individual is None:
                raise IndividualNotFoundError(ontology_iri, individual_iri)
            if not ontology_property.is_object_property:
                raise PropertyKindError(ontology_iri, property_iri)

            # literal assertions under the same property are skipped
            related = sorted(
                assertion.target
                for assertion in individual.assertions_for(property_iri)
                if isinstance(assertion, IndividualAssertion)
            )

        logger.debug(f"related_individuals {individual_iri} via {property_iri}: {len(related)} individuals")
        return related

    def shortest_path(self, ontology_iri, start, end) -> Optional[List[Iri]]:
        if not self.settings.inference.property_paths:
            logger.warning("Property path inference disabled; shortest_path returns no result")
            return None
        ontology_iri, start, end = iri(ontology_iri), iri(start), iri(end)

        with self.store.guard() as ontologies:
            ontology = _get_ontology(ontologies, ontology_iri)
            for endpoint in (start, end):
                if ontology.get_individual(endpoint) is None:
                    raise IndividualNotFoundError(ontology_iri, endpoint)
            path = find_shortest_path(ontology, start, end)

        if path is None:
            logger.debug(f"shortest_path {start} -> {end}: unreachable")
        else:
            logger.debug(f"shortest_path {start} -> {end}: {len(path)} individuals")
        return path


def _get_ontology(ontologies: Dict[Iri, Ontology], ontology_iri: Iri) -> Ontology:
    ontology = ontologies.get(ontology_iri)
    if ontology is None:
        raise OntologyNotFoundError(ontology_iri)
    return ontology
