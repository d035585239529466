"""
Unit test for the ontology domain models and the Ontology aggregate.

HOW TO RUN:
The virtual environment .venv should be activated before running the tests.

From the project root, run:
    pytest src/ontology/test_domain.py
"""

import pytest

from .domain import (
    DuplicateClassError,
    DuplicateIndividualError,
    DuplicatePropertyError,
    IndividualAssertion,
    InvalidPropertyAssertionError,
    LiteralAssertion,
    MissingClassError,
    MissingPropertyError,
    Ontology,
    OntologyClass,
    OntologyIndividual,
    OntologyProperty,
    PropertyKind,
)
from .iri import InvalidIriError, Iri

EX = "https://example.org/"


def _iri(name: str) -> Iri:
    return Iri(EX + name)


@pytest.fixture
def ontology():
    """Ontology with one class and one object and one data property."""
    onto = Ontology(EX + "onto", label="Example")
    onto.add_class(OntologyClass(EX + "Class"))
    onto.add_property(OntologyProperty(EX + "link", PropertyKind.OBJECT, domains={EX + "Class"}, ranges={EX + "Class"}))
    onto.add_property(OntologyProperty(EX + "name", PropertyKind.DATA, domains={EX + "Class"}))
    return onto


def test_class_parents_are_tracked():
    """Test OntologyClass creation and parent bookkeeping."""
    print("Testing OntologyClass parents...")

    ontology_class = OntologyClass(EX + "Class", label="Example", comment="Demo")
    assert ontology_class.iri == _iri("Class")
    assert ontology_class.label == "Example"
    assert ontology_class.comment == "Demo"

    assert ontology_class.add_parent(EX + "Base")
    assert not ontology_class.add_parent(_iri("Base"))
    assert ontology_class.parents == [_iri("Base")]
    assert ontology_class.remove_parent(_iri("Base"))
    assert not ontology_class.remove_parent(_iri("Base"))
    assert ontology_class.parent_classes == set()

    print("✓ OntologyClass parents working correctly")


def test_entities_reject_invalid_identifiers():
    with pytest.raises(InvalidIriError):
        OntologyClass("not an iri")
    with pytest.raises(InvalidIriError):
        OntologyProperty(EX + "p", PropertyKind.OBJECT, domains={"bad iri"})


def test_property_kind_accepts_string_values():
    ontology_property = OntologyProperty(EX + "p", "DatatypeProperty")
    assert ontology_property.property_type is PropertyKind.DATA
    assert not ontology_property.is_object_property
    assert ontology_property.add_domain(EX + "A")
    assert not ontology_property.add_domain(EX + "A")
    assert ontology_property.add_range(EX + "B")


def test_individual_assertions_keep_order():
    individual = OntologyIndividual(EX + "alice")
    assert individual.assert_type(EX + "Class")
    assert not individual.assert_type(EX + "Class")

    individual.add_property_assertion(EX + "link", IndividualAssertion(EX + "bob"))
    individual.add_property_assertion(EX + "link", IndividualAssertion(EX + "carol"))
    assert individual.assertions_for(EX + "link") == [
        IndividualAssertion(_iri("bob")),
        IndividualAssertion(_iri("carol")),
    ]
    assert individual.assertions_for(EX + "other") == []


def test_duplicate_class_is_rejected(ontology):
    """Test that a duplicate class leaves the existing entry unchanged."""
    print("Testing duplicate class rejection...")

    with pytest.raises(DuplicateClassError) as excinfo:
        ontology.add_class(OntologyClass(EX + "Class", label="Replacement"))
    assert excinfo.value.iri == _iri("Class")
    assert ontology.get_class(EX + "Class").label is None
    assert ontology.class_count == 1

    print("✓ Duplicate class rejection working correctly")


def test_property_requires_known_classes(ontology):
    """Test that domain and range classes must exist."""
    print("Testing property reference validation...")

    unknown_domain = OntologyProperty(EX + "p1", PropertyKind.OBJECT, domains={EX + "Missing"})
    with pytest.raises(MissingClassError) as excinfo:
        ontology.add_property(unknown_domain)
    assert excinfo.value.ontology == _iri("onto")
    assert excinfo.value.class_iri == _iri("Missing")
    assert ontology.get_property(EX + "p1") is None

    unknown_range = OntologyProperty(EX + "p2", PropertyKind.OBJECT, domains={EX + "Class"}, ranges={EX + "Other"})
    with pytest.raises(MissingClassError):
        ontology.add_property(unknown_range)
    assert ontology.get_property(EX + "p2") is None

    print("✓ Property reference validation working correctly")


def test_duplicate_property_is_rejected(ontology):
    with pytest.raises(DuplicatePropertyError):
        ontology.add_property(OntologyProperty(EX + "link", PropertyKind.DATA))
    assert ontology.get_property(EX + "link").property_type is PropertyKind.OBJECT


def test_individual_insertion_checks_references(ontology):
    """Test that a well-formed individual is accepted."""
    alice = OntologyIndividual(EX + "alice", types={EX + "Class"})
    alice.add_property_assertion(EX + "link", IndividualAssertion(EX + "bob"))
    alice.add_property_assertion(EX + "name", LiteralAssertion("Alice"))

    ontology.add_individual(alice)

    assert ontology.get_individual(EX + "alice") is alice
    assert ontology.individual_count == 1


def test_individual_with_unknown_type_is_rejected(ontology):
    with pytest.raises(MissingClassError):
        ontology.add_individual(OntologyIndividual(EX + "alice", types={EX + "Missing"}))
    assert ontology.get_individual(EX + "alice") is None


def test_individual_with_unknown_property_is_rejected(ontology):
    alice = OntologyIndividual(EX + "alice", types={EX + "Class"})
    alice.add_property_assertion(EX + "unknown", LiteralAssertion("x"))

    with pytest.raises(MissingPropertyError) as excinfo:
        ontology.add_individual(alice)
    assert excinfo.value.property_iri == _iri("unknown")
    assert ontology.individual_count == 0


@pytest.mark.parametrize("property_name, assertion", [
    ("name", IndividualAssertion(EX + "bob")),
    ("link", LiteralAssertion("bob")),
])
def test_individual_with_mismatched_property_kind_is_rejected(ontology, property_name, assertion):
    """Test that an assertion must match the kind of its property."""
    alice = OntologyIndividual(EX + "alice", types={EX + "Class"})
    alice.add_property_assertion(EX + property_name, assertion)

    with pytest.raises(InvalidPropertyAssertionError) as excinfo:
        ontology.add_individual(alice)
    assert excinfo.value.property_iri == _iri(property_name)
    assert ontology.get_individual(EX + "alice") is None
    assert ontology.individuals == []


def test_duplicate_individual_is_rejected(ontology):
    ontology.add_individual(OntologyIndividual(EX + "alice"))
    with pytest.raises(DuplicateIndividualError):
        ontology.add_individual(OntologyIndividual(EX + "alice", types={EX + "Class"}))
    assert ontology.get_individual(EX + "alice").types == set()


def test_wrong_entity_types_are_rejected(ontology):
    with pytest.raises(TypeError):
        ontology.add_class(None)
    with pytest.raises(TypeError):
        ontology.add_property(OntologyClass(EX + "Other"))
    with pytest.raises(TypeError):
        ontology.add_individual({"iri": EX + "alice"})

    assert ontology.class_count == 1
    assert ontology.property_count == 2
    assert ontology.individual_count == 0


def test_collections_are_ordered_by_identifier():
    onto = Ontology(EX + "onto")
    for name in ["Zebra", "Ant", "Moose"]:
        onto.add_class(OntologyClass(EX + name))

    assert [c.iri for c in onto.classes] == [_iri("Ant"), _iri("Moose"), _iri("Zebra")]
    assert onto.get_class(EX + "Unknown") is None


def test_parent_cycles_are_not_rejected():
    """Parent references are not validated, cycles included."""
    onto = Ontology(EX + "onto")
    onto.add_class(OntologyClass(EX + "A", parent_classes={EX + "B"}))
    onto.add_class(OntologyClass(EX + "B", parent_classes={EX + "A"}))
    onto.add_class(OntologyClass(EX + "C", parent_classes={EX + "Undeclared"}))
    assert onto.class_count == 3
