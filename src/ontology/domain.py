"""
Domain models for the ontology module.

These models represent the core ontology entities (classes, properties and
individuals) and the Ontology aggregate which owns them and enforces their
referential invariants at mutation time.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Set, Union

from .iri import Iri, iri


class PropertyKind(str, Enum):
    """Kind of values a property can hold."""
    OBJECT = "ObjectProperty"      # values reference other individuals
    DATA = "DatatypeProperty"      # values are literals


@dataclass(frozen=True)
class IndividualAssertion:
    """Property value pointing at another individual."""

    target: Iri

    def __post_init__(self):
        object.__setattr__(self, "target", iri(self.target))


@dataclass(frozen=True)
class LiteralAssertion:
    """Property value carrying a literal."""

    value: str


PropertyAssertion = Union[IndividualAssertion, LiteralAssertion]


@dataclass
class OntologyClass:
    """Represents a class in the ontology with its parent classes (rdfs:subClassOf)."""

    iri: Iri
    label: Optional[str] = None
    comment: Optional[str] = None
    parent_classes: Set[Iri] = field(default_factory=set)

    def __post_init__(self):
        self.iri = iri(self.iri)
        self.parent_classes = {iri(parent) for parent in self.parent_classes}

    def add_parent(self, parent) -> bool:
        """Add a parent class. Returns False if it was already declared."""
        parent = iri(parent)
        if parent in self.parent_classes:
            return False
        self.parent_classes.add(parent)
        return True

    def remove_parent(self, parent) -> bool:
        parent = iri(parent)
        if parent not in self.parent_classes:
            return False
        self.parent_classes.discard(parent)
        return True

    @property
    def parents(self) -> List[Iri]:
        """Parent classes in lexical order."""
        return sorted(self.parent_classes)


@dataclass
class OntologyProperty:
    """Represents a property (object or datatype) in the ontology."""

    iri: Iri
    property_type: PropertyKind
    label: Optional[str] = None
    domains: Set[Iri] = field(default_factory=set)    # source classes
    ranges: Set[Iri] = field(default_factory=set)     # target classes

    def __post_init__(self):
        self.iri = iri(self.iri)
        self.property_type = PropertyKind(self.property_type)
        self.domains = {iri(cls) for cls in self.domains}
        self.ranges = {iri(cls) for cls in self.ranges}

    def add_domain(self, class_iri) -> bool:
        class_iri = iri(class_iri)
        if class_iri in self.domains:
            return False
        self.domains.add(class_iri)
        return True

    def add_range(self, class_iri) -> bool:
        class_iri = iri(class_iri)
        if class_iri in self.ranges:
            return False
        self.ranges.add(class_iri)
        return True

    @property
    def is_object_property(self) -> bool:
        return self.property_type is PropertyKind.OBJECT


@dataclass
class OntologyIndividual:
    """An individual with its asserted types and property assertions."""

    iri: Iri
    types: Set[Iri] = field(default_factory=set)
    property_assertions: Dict[Iri, List[PropertyAssertion]] = field(default_factory=dict)

    def __post_init__(self):
        self.iri = iri(self.iri)
        self.types = {iri(cls) for cls in self.types}
        self.property_assertions = {
            iri(prop): list(assertions)
            for prop, assertions in self.property_assertions.items()
        }

    def assert_type(self, class_iri) -> bool:
        """Declare that the individual is an instance of the given class."""
        class_iri = iri(class_iri)
        if class_iri in self.types:
            return False
        self.types.add(class_iri)
        return True

    def add_property_assertion(self, property_iri, assertion: PropertyAssertion) -> None:
        self.property_assertions.setdefault(iri(property_iri), []).append(assertion)

    def assertions_for(self, property_iri) -> List[PropertyAssertion]:
        return list(self.property_assertions.get(iri(property_iri), []))


class OntologyError(Exception):
    """Base class for invariant violations raised by the Ontology aggregate."""


class DuplicateClassError(OntologyError):
    def __init__(self, class_iri: Iri):
        self.iri = class_iri
        super().__init__(f"class `{class_iri}` already exists")


class DuplicatePropertyError(OntologyError):
    def __init__(self, property_iri: Iri):
        self.iri = property_iri
        super().__init__(f"property `{property_iri}` already exists")


class DuplicateIndividualError(OntologyError):
    def __init__(self, individual_iri: Iri):
        self.iri = individual_iri
        super().__init__(f"individual `{individual_iri}` already exists")


class MissingClassError(OntologyError):
    def __init__(self, ontology: Iri, class_iri: Iri):
        self.ontology = ontology
        self.class_iri = class_iri
        super().__init__(f"class `{class_iri}` does not exist in ontology `{ontology}`")


class MissingPropertyError(OntologyError):
    def __init__(self, ontology: Iri, property_iri: Iri):
        self.ontology = ontology
        self.property_iri = property_iri
        super().__init__(f"property `{property_iri}` does not exist in ontology `{ontology}`")


class InvalidPropertyAssertionError(OntologyError):
    def __init__(self, ontology: Iri, property_iri: Iri):
        self.ontology = ontology
        self.property_iri = property_iri
        super().__init__(
            f"property assertion does not match property `{property_iri}` in ontology `{ontology}`"
        )


class Ontology:
    """
    Aggregate root owning classes, properties and individuals.

    Invariants are checked when an entity is added and never retroactively:
    identifiers are unique per collection, property domains/ranges and
    individual types reference existing classes, and every property assertion
    references an existing property of the matching kind. Nothing is committed
    unless the whole entity validates.

    Parent classes are not checked, so the subclass graph may be incomplete or
    even cyclic. Traversals must tolerate both.
    """

    def __init__(self, ontology_iri, label: Optional[str] = None):
        self.iri = iri(ontology_iri)
        self.label = label
        self._classes: Dict[Iri, OntologyClass] = {}
        self._properties: Dict[Iri, OntologyProperty] = {}
        self._individuals: Dict[Iri, OntologyIndividual] = {}

    def __repr__(self) -> str:
        return (
            f"Ontology(iri={self.iri!r}, label={self.label!r}, classes={len(self._classes)}, "
            f"properties={len(self._properties)}, individuals={len(self._individuals)})"
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ontology):
            return NotImplemented
        return (
            self.iri == other.iri
            and self.label == other.label
            and self._classes == other._classes
            and self._properties == other._properties
            and self._individuals == other._individuals
        )

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_class(self, ontology_class: OntologyClass) -> None:
        """Add a class, rejecting duplicate identifiers."""
        require_instance(ontology_class, OntologyClass, "ontology_class")
        if ontology_class.iri in self._classes:
            raise DuplicateClassError(ontology_class.iri)
        self._classes[ontology_class.iri] = ontology_class

    def add_property(self, ontology_property: OntologyProperty) -> None:
        """Add a property after checking its domain and range classes exist."""
        require_instance(ontology_property, OntologyProperty, "ontology_property")
        if ontology_property.iri in self._properties:
            raise DuplicatePropertyError(ontology_property.iri)

        for class_iri in sorted(ontology_property.domains):
            self._require_class(class_iri)
        for class_iri in sorted(ontology_property.ranges):
            self._require_class(class_iri)

        self._properties[ontology_property.iri] = ontology_property

    def add_individual(self, individual: OntologyIndividual) -> None:
        """Add an individual after checking its types and property assertions."""
        require_instance(individual, OntologyIndividual, "individual")
        if individual.iri in self._individuals:
            raise DuplicateIndividualError(individual.iri)

        for class_iri in sorted(individual.types):
            self._require_class(class_iri)

        for property_iri in sorted(individual.property_assertions):
            ontology_property = self._properties.get(property_iri)
            if ontology_property is None:
                raise MissingPropertyError(self.iri, property_iri)

            for assertion in individual.property_assertions[property_iri]:
                if not _assertion_matches(ontology_property.property_type, assertion):
                    raise InvalidPropertyAssertionError(self.iri, property_iri)

        self._individuals[individual.iri] = individual

    def _require_class(self, class_iri: Iri) -> None:
        if class_iri not in self._classes:
            raise MissingClassError(self.iri, class_iri)

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    def get_class(self, class_iri) -> Optional[OntologyClass]:
        return self._classes.get(iri(class_iri))

    def get_property(self, property_iri) -> Optional[OntologyProperty]:
        return self._properties.get(iri(property_iri))

    def get_individual(self, individual_iri) -> Optional[OntologyIndividual]:
        return self._individuals.get(iri(individual_iri))

    @property
    def classes(self) -> List[OntologyClass]:
        """All classes ordered by identifier."""
        return [self._classes[key] for key in sorted(self._classes)]

    @property
    def properties(self) -> List[OntologyProperty]:
        """All properties ordered by identifier."""
        return [self._properties[key] for key in sorted(self._properties)]

    @property
    def individuals(self) -> List[OntologyIndividual]:
        """All individuals ordered by identifier."""
        return [self._individuals[key] for key in sorted(self._individuals)]

    @property
    def class_count(self) -> int:
        return len(self._classes)

    @property
    def property_count(self) -> int:
        return len(self._properties)

    @property
    def individual_count(self) -> int:
        return len(self._individuals)


def _assertion_matches(kind: PropertyKind, assertion: PropertyAssertion) -> bool:
    if kind is PropertyKind.OBJECT:
        return isinstance(assertion, IndividualAssertion)
    return isinstance(assertion, LiteralAssertion)


def require_instance(value, expected: type, argument: str) -> None:
    """Raise TypeError unless `value` is an instance of `expected`."""
    if not isinstance(value, expected):
        raise TypeError(f"{argument} must be {expected.__name__}, got {type(value).__name__}")
