"""Sample Quad Data for Testing

Builders for quad sets covering plain entities, RDF lists (well-formed and
malformed), typed literals and named graphs.
"""

from typing import List, Optional, Sequence

from rdflib import URIRef, BNode, Literal, Namespace
from rdflib.namespace import RDF, XSD

from rdfjsonld.model.quad_model import Quad, Node

EX = Namespace("http://ex/")

SUBJECT_A = URIRef("ex:a")
SUBJECT_B = URIRef("ex:b")
ITEMS = EX["items"]
NAME = EX["name"]
KNOWS = EX["knows"]
PERSON = URIRef("ex:Person")
GRAPH_G = URIRef("ex:g")
GRAPH_H = URIRef("ex:h")


def create_list_quads(values: Sequence[Node],
                      subject: Node = SUBJECT_A,
                      predicate: URIRef = ITEMS,
                      prefix: str = "l",
                      graph: Optional[Node] = None) -> List[Quad]:
    """Encode values as an rdf:first/rdf:rest chain referenced by (subject, predicate, head)."""
    cells = [BNode(f"{prefix}{i}") for i in range(len(values))]
    quads = [Quad(subject, predicate, cells[0], graph)]

    for i, (cell, value) in enumerate(zip(cells, values)):
        rest = cells[i + 1] if i + 1 < len(cells) else RDF.nil
        quads.append(Quad(cell, RDF.first, value, graph))
        quads.append(Quad(cell, RDF.rest, rest, graph))

    return quads


def create_simple_list() -> List[Quad]:
    """The list [1, 2, 3] as plain literals."""
    return create_list_quads([Literal("1"), Literal("2"), Literal("3")])


def create_person_quads() -> List[Quad]:
    """One typed entity with a name and a link to another entity."""
    return [
        Quad(SUBJECT_A, RDF.type, PERSON),
        Quad(SUBJECT_A, NAME, Literal("Alice", lang="en")),
        Quad(SUBJECT_A, KNOWS, SUBJECT_B),
        Quad(SUBJECT_B, NAME, Literal("Bob")),
    ]


def create_typed_literal_quads() -> List[Quad]:
    """Literals of every natively coerced datatype plus an unsupported one."""
    return [
        Quad(SUBJECT_A, EX["active"], Literal("true", datatype=XSD.boolean)),
        Quad(SUBJECT_A, EX["age"], Literal("42", datatype=XSD.integer)),
        Quad(SUBJECT_A, EX["score"], Literal("2.5", datatype=XSD.double)),
        Quad(SUBJECT_A, EX["born"], Literal("1990-01-01", datatype=XSD.date)),
    ]


def create_malformed_list() -> List[Quad]:
    """A cell with two rdf:first values terminated by rdf:nil."""
    cell = BNode("bad")
    return [
        Quad(SUBJECT_A, ITEMS, cell),
        Quad(cell, RDF.first, Literal("x")),
        Quad(cell, RDF.first, Literal("y")),
        Quad(cell, RDF.rest, RDF.nil),
    ]


def create_shared_tail_list() -> List[Quad]:
    """Two cells whose rdf:rest both point at the same tail cell."""
    left, right, tail = BNode("left"), BNode("right"), BNode("tail")
    return [
        Quad(SUBJECT_A, ITEMS, left),
        Quad(SUBJECT_B, ITEMS, right),
        Quad(left, RDF.first, Literal("l")),
        Quad(left, RDF.rest, tail),
        Quad(right, RDF.first, Literal("r")),
        Quad(right, RDF.rest, tail),
        Quad(tail, RDF.first, Literal("t")),
        Quad(tail, RDF.rest, RDF.nil),
    ]


def create_named_graph_quads() -> List[Quad]:
    """A default-graph entity and two named graphs."""
    return [
        Quad(SUBJECT_A, NAME, Literal("Alice")),
        Quad(SUBJECT_A, NAME, Literal("Alice in g"), GRAPH_G),
        Quad(SUBJECT_B, NAME, Literal("Bob in g"), GRAPH_G),
        Quad(SUBJECT_B, NAME, Literal("Bob in h"), GRAPH_H),
    ]
