"""JSON-LD keywords and the RDF vocabulary terms the serializer depends on."""

from rdflib import URIRef
from rdflib.namespace import RDF


ID = "@id"
TYPE = "@type"
VALUE = "@value"
LANGUAGE = "@language"
LIST = "@list"
GRAPH = "@graph"

RDF_FIRST = RDF.first
RDF_REST = RDF.rest
RDF_NIL = RDF.nil
RDF_TYPE = RDF.type

# Pseudo-predicate carrying the @type slot when rdf:type is emitted as a property
TYPE_PREDICATE = URIRef(TYPE)
