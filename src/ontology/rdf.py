"""
Projection of an Ontology aggregate into an rdflib Graph.

The graph is a read-only export using OWL/RDFS vocabulary; it is rebuilt on
every call and never fed back into the store.
"""

from rdflib import OWL, RDF, RDFS, Graph, Literal

from .domain import IndividualAssertion, Ontology, PropertyKind


def ontology_to_graph(ontology: Ontology) -> Graph:
    """Build an RDF graph describing the ontology, its entities and assertions."""
    graph = Graph()
    graph.bind("owl", OWL)
    graph.bind("rdfs", RDFS)

    ontology_node = ontology.iri.to_uriref()
    graph.add((ontology_node, RDF.type, OWL.Ontology))
    if ontology.label:
        graph.add((ontology_node, RDFS.label, Literal(ontology.label)))

    for ontology_class in ontology.classes:
        class_node = ontology_class.iri.to_uriref()
        graph.add((class_node, RDF.type, OWL.Class))
        if ontology_class.label:
            graph.add((class_node, RDFS.label, Literal(ontology_class.label)))
        if ontology_class.comment:
            graph.add((class_node, RDFS.comment, Literal(ontology_class.comment)))
        for parent in ontology_class.parents:
            graph.add((class_node, RDFS.subClassOf, parent.to_uriref()))

    for ontology_property in ontology.properties:
        property_node = ontology_property.iri.to_uriref()
        if ontology_property.property_type is PropertyKind.OBJECT:
            graph.add((property_node, RDF.type, OWL.ObjectProperty))
        else:
            graph.add((property_node, RDF.type, OWL.DatatypeProperty))
        if ontology_property.label:
            graph.add((property_node, RDFS.label, Literal(ontology_property.label)))
        for domain in sorted(ontology_property.domains):
            graph.add((property_node, RDFS.domain, domain.to_uriref()))
        for range_ in sorted(ontology_property.ranges):
            graph.add((property_node, RDFS.range, range_.to_uriref()))

    for individual in ontology.individuals:
        individual_node = individual.iri.to_uriref()
        graph.add((individual_node, RDF.type, OWL.NamedIndividual))
        for class_iri in sorted(individual.types):
            graph.add((individual_node, RDF.type, class_iri.to_uriref()))
        for property_iri, assertions in individual.property_assertions.items():
            for assertion in assertions:
                if isinstance(assertion, IndividualAssertion):
                    value = assertion.target.to_uriref()
                else:
                    value = Literal(assertion.value)
                graph.add((individual_node, property_iri.to_uriref(), value))

    return graph
