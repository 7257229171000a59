"""Tests for EntitySerializer"""

import sys
from pathlib import Path

from rdflib import URIRef, BNode, Literal
from rdflib.namespace import RDF, XSD

# Add the parent directory to the path so we can import rdfjsonld
sys.path.insert(0, str(Path(__file__).parent.parent))

from rdfjsonld.jsonld.entity_serializer import EntitySerializer
from rdfjsonld.jsonld.keywords import TYPE_PREDICATE
from rdfjsonld.jsonld.list_reconstructor import ListReconstructor
from rdfjsonld.model.quad_model import Quad
from test_jsonld.fixtures.sample_quads import (
    EX,
    SUBJECT_A,
    SUBJECT_B,
    NAME,
    KNOWS,
    PERSON,
    ITEMS,
    create_person_quads,
    create_simple_list,
)


class TestEntitySerializer:
    """Serialization of one subject into a node object."""

    def test_iri_subject(self):
        node = EntitySerializer().serialize(SUBJECT_B, create_person_quads())
        assert node == {"@id": "ex:b", "http://ex/name": [{"@value": "Bob"}]}

    def test_blank_subject_gets_prefix(self):
        quads = [Quad(BNode("b1"), NAME, Literal("anon"))]
        node = EntitySerializer().serialize(BNode("b1"), quads)
        assert node["@id"] == "_:b1"

    def test_type_and_properties(self):
        node = EntitySerializer().serialize(SUBJECT_A, create_person_quads())

        assert node == {
            "@id": "ex:a",
            "@type": ["ex:Person"],
            "http://ex/knows": [{"@id": "ex:b"}],
            "http://ex/name": [{"@value": "Alice", "@language": "en"}],
        }
        assert list(node.keys()) == ["@id", "@type", "http://ex/knows", "http://ex/name"]

    def test_rdf_type_as_property(self):
        serializer = EntitySerializer(use_rdf_type=True)
        node = serializer.serialize(SUBJECT_A, [Quad(SUBJECT_A, RDF.type, PERSON)])

        assert node == {
            "@id": "ex:a",
            str(RDF.type): [{"@id": "ex:Person"}],
        }

    def test_type_pseudo_predicate_with_rdf_type_mode(self):
        quads = [
            Quad(SUBJECT_A, RDF.type, PERSON),
            Quad(SUBJECT_A, TYPE_PREDICATE, URIRef("ex:Agent")),
        ]
        node = EntitySerializer(use_rdf_type=True).serialize(SUBJECT_A, quads)

        assert node["@type"] == ["ex:Agent"]
        assert node[str(RDF.type)] == [{"@id": "ex:Person"}]

    def test_multiple_types_are_sorted(self):
        quads = [
            Quad(SUBJECT_A, RDF.type, URIRef("ex:Zebra")),
            Quad(SUBJECT_A, RDF.type, URIRef("ex:Animal")),
        ]
        node = EntitySerializer().serialize(SUBJECT_A, quads)
        assert node["@type"] == ["ex:Animal", "ex:Zebra"]

    def test_objects_sorted_within_predicate(self):
        quads = [
            Quad(SUBJECT_A, KNOWS, Literal("z")),
            Quad(SUBJECT_A, KNOWS, BNode("q")),
            Quad(SUBJECT_A, KNOWS, URIRef("ex:c")),
            Quad(SUBJECT_A, KNOWS, Literal("a")),
        ]
        node = EntitySerializer().serialize(SUBJECT_A, quads)

        assert node["http://ex/knows"] == [
            {"@id": "ex:c"},
            {"@id": "_:q"},
            {"@value": "a"},
            {"@value": "z"},
        ]

    def test_list_head_object(self):
        quads = create_simple_list()
        lists = ListReconstructor().reconstruct(quads)
        node = EntitySerializer(lists).serialize(SUBJECT_A, quads)

        assert node == {
            "@id": "ex:a",
            "http://ex/items": [
                {"@list": [{"@value": "1"}, {"@value": "2"}, {"@value": "3"}]}
            ],
        }

    def test_nil_object_is_empty_list(self):
        node = EntitySerializer().serialize(SUBJECT_A, [Quad(SUBJECT_A, ITEMS, RDF.nil)])
        assert node["http://ex/items"] == [{"@list": []}]

    def test_native_types(self):
        quads = [Quad(SUBJECT_A, EX["age"], Literal("42", datatype=XSD.integer))]

        assert EntitySerializer(use_native_types=True).serialize(SUBJECT_A, quads)["http://ex/age"] == [
            {"@value": 42}
        ]
        assert EntitySerializer().serialize(SUBJECT_A, quads)["http://ex/age"] == [
            {"@value": "42", "@type": "http://www.w3.org/2001/XMLSchema#integer"}
        ]

    def test_other_subjects_are_ignored(self):
        node = EntitySerializer().serialize(SUBJECT_A, [Quad(SUBJECT_B, NAME, Literal("Bob"))])
        assert node == {"@id": "ex:a"}
