"""
Unit test for the RDF export of ontology aggregates.

HOW TO RUN:
The virtual environment .venv should be activated before running the tests.

From the project root, run:
    pytest src/ontology/test_rdf.py
"""

from rdflib import OWL, RDF, RDFS, Literal, URIRef

from .domain import (
    IndividualAssertion,
    LiteralAssertion,
    Ontology,
    OntologyClass,
    OntologyIndividual,
    OntologyProperty,
    PropertyKind,
)
from .rdf import ontology_to_graph

EX = "https://example.org/"


def test_ontology_to_graph():
    """Test the OWL/RDFS triples produced for each entity kind."""
    print("Testing ontology_to_graph...")

    ontology = Ontology(EX + "onto", label="Vehicles")
    ontology.add_class(OntologyClass(EX + "Vehicle", label="Vehicle", comment="Means of transport"))
    ontology.add_class(OntologyClass(EX + "Car", parent_classes={EX + "Vehicle"}))
    ontology.add_property(OntologyProperty(EX + "tows", PropertyKind.OBJECT, label="tows",
                                           domains={EX + "Vehicle"}, ranges={EX + "Vehicle"}))
    ontology.add_property(OntologyProperty(EX + "plate", PropertyKind.DATA, domains={EX + "Car"}))

    car = OntologyIndividual(EX + "car1", types={EX + "Car"})
    car.add_property_assertion(EX + "tows", IndividualAssertion(EX + "trailer1"))
    car.add_property_assertion(EX + "plate", LiteralAssertion("1AB 2345"))
    ontology.add_individual(car)

    graph = ontology_to_graph(ontology)

    def node(name):
        return URIRef(EX + name)

    assert (node("onto"), RDF.type, OWL.Ontology) in graph
    assert (node("onto"), RDFS.label, Literal("Vehicles")) in graph
    assert (node("Vehicle"), RDF.type, OWL.Class) in graph
    assert (node("Vehicle"), RDFS.comment, Literal("Means of transport")) in graph
    assert (node("Car"), RDFS.subClassOf, node("Vehicle")) in graph
    assert (node("tows"), RDF.type, OWL.ObjectProperty) in graph
    assert (node("tows"), RDFS.domain, node("Vehicle")) in graph
    assert (node("tows"), RDFS.range, node("Vehicle")) in graph
    assert (node("plate"), RDF.type, OWL.DatatypeProperty) in graph
    assert (node("car1"), RDF.type, OWL.NamedIndividual) in graph
    assert (node("car1"), RDF.type, node("Car")) in graph
    assert (node("car1"), node("tows"), node("trailer1")) in graph
    assert (node("car1"), node("plate"), Literal("1AB 2345")) in graph

    print("✓ ontology_to_graph working correctly")


def test_empty_ontology_graph():
    graph = ontology_to_graph(Ontology(EX + "empty"))
    assert len(graph) == 1
