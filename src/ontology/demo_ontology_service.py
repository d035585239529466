"""
Demo script for the Ontology Service module.

This script shows how developers of other modules use the ontology store:
building an ontology through the repository handle, querying it through the
reasoner handle and exporting it as RDF.

HOW TO RUN:
The virtual environment .venv should be activated before running.

From the src directory, run:
    python -m ontology.demo_ontology_service

Inference toggles can be switched off through the environment, e.g.
    REASONER_INFERENCE_PROPERTY_PATHS=false python -m ontology.demo_ontology_service
"""

import logging

from .domain import (
    IndividualAssertion,
    LiteralAssertion,
    Ontology,
    OntologyClass,
    OntologyIndividual,
    OntologyProperty,
    PropertyKind,
)
from .errors import OntologyServiceError
from .service import OntologyService

EX = "https://example.org/vehicles/"
ONTOLOGY_IRI = EX + "ontology"


def demo_building_ontology(service: OntologyService):
    """Create an ontology and attach entities one by one."""
    print("=" * 70)
    print("1. BUILDING AN ONTOLOGY")
    print("=" * 70)

    repository = service.repository()
    repository.insert(Ontology(ONTOLOGY_IRI, label="Road vehicles"))

    repository.attach_class(ONTOLOGY_IRI, OntologyClass(EX + "Vehicle", label="Vehicle"))
    repository.attach_class(ONTOLOGY_IRI, OntologyClass(EX + "RoadVehicle", label="Road vehicle",
                                                        parent_classes={EX + "Vehicle"}))
    repository.attach_class(ONTOLOGY_IRI, OntologyClass(EX + "Truck", label="Truck",
                                                        parent_classes={EX + "RoadVehicle"}))
    repository.attach_class(ONTOLOGY_IRI, OntologyClass(EX + "Person", label="Person"))

    repository.attach_property(ONTOLOGY_IRI, OntologyProperty(EX + "ownedBy", PropertyKind.OBJECT,
                                                              domains={EX + "Vehicle"}, ranges={EX + "Person"}))
    repository.attach_property(ONTOLOGY_IRI, OntologyProperty(EX + "knows", PropertyKind.OBJECT,
                                                              domains={EX + "Person"}, ranges={EX + "Person"}))
    repository.attach_property(ONTOLOGY_IRI, OntologyProperty(EX + "plate", PropertyKind.DATA,
                                                              domains={EX + "Vehicle"}))

    truck = OntologyIndividual(EX + "truck1", types={EX + "Truck"})
    truck.add_property_assertion(EX + "ownedBy", IndividualAssertion(EX + "alice"))
    truck.add_property_assertion(EX + "plate", LiteralAssertion("1AB 2345"))
    alice = OntologyIndividual(EX + "alice", types={EX + "Person"})
    alice.add_property_assertion(EX + "knows", IndividualAssertion(EX + "bob"))

    for individual in [truck, alice, OntologyIndividual(EX + "bob", types={EX + "Person"})]:
        repository.attach_individual(ONTOLOGY_IRI, individual)

    for summary in repository.list():
        print(f"✓ {summary.iri} ({summary.label}): {summary.class_count} classes, "
              f"{summary.property_count} properties, {summary.individual_count} individuals")


def demo_reasoning(service: OntologyService):
    """Answer structural queries over the stored ontology."""
    print("\n" + "=" * 70)
    print("2. REASONING")
    print("=" * 70)

    reasoner = service.reasoner()
    ancestors = reasoner.ancestors_of(ONTOLOGY_IRI, EX + "Truck")
    print(f"Ancestors of Truck: {[str(c) for c in ancestors]}")
    subclasses = reasoner.descendants_of(ONTOLOGY_IRI, EX + "Vehicle")
    print(f"Direct subclasses of Vehicle: {[str(c) for c in subclasses]}")
    owners = reasoner.related_individuals(ONTOLOGY_IRI, EX + "ownedBy", EX + "truck1")
    print(f"truck1 ownedBy: {[str(i) for i in owners]}")

    path = reasoner.shortest_path(ONTOLOGY_IRI, EX + "truck1", EX + "bob")
    print(f"Path truck1 -> bob: {[str(i) for i in path] if path else 'none'}")

    try:
        reasoner.related_individuals(ONTOLOGY_IRI, EX + "plate", EX + "truck1")
    except OntologyServiceError as e:
        print(f"✓ Expected error: {e}")


def demo_export(service: OntologyService):
    """Serialize the ontology to Turtle."""
    print("\n" + "=" * 70)
    print("3. RDF EXPORT")
    print("=" * 70)

    graph = service.export_graph(ONTOLOGY_IRI)
    print(graph.serialize(format="turtle"))


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    service = OntologyService.from_env()
    demo_building_ontology(service)
    demo_reasoning(service)
    demo_export(service)


if __name__ == "__main__":
    main()
