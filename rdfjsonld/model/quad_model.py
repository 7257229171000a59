"""Quad Model

Immutable value types for RDF statements. RDF terms are rdflib terms
(URIRef, BNode, Literal); a Quad adds an optional graph name to a triple.
"""

from typing import NamedTuple, Optional, Union, Tuple, Any

from rdflib import URIRef, BNode, Literal


Node = Union[URIRef, BNode, Literal]

BLANK_NODE_PREFIX = "_:"

# Sort rank of each term kind when ordering object values
_KIND_RANK = {URIRef: 0, BNode: 1, Literal: 2}


class Quad(NamedTuple):
    """An RDF statement with an optional named graph (None is the default graph)."""
    subject: Node
    predicate: URIRef
    object: Node
    graph: Optional[Node] = None

    @classmethod
    def of(cls, statement: Union["Quad", Tuple[Any, ...]]) -> "Quad":
        """
        Build a Quad from a Quad, a (s, p, o) triple or a (s, p, o, g) tuple.

        Args:
            statement: Quad or tuple of rdflib terms

        Returns:
            Quad instance

        Raises:
            ValueError: If the tuple does not have 3 or 4 members
        """
        if isinstance(statement, Quad):
            return statement
        if len(statement) == 3:
            subject, predicate, obj = statement
            return cls(subject, predicate, obj, None)
        if len(statement) == 4:
            return cls(*statement)
        raise ValueError(f"Expected a triple or quad, got {len(statement)} members")


def node_id(node: Node) -> str:
    """
    Identifier string of a term.

    IRIs map to their string form, blank nodes to ``_:`` plus their label
    and literals to their lexical form.
    """
    if isinstance(node, BNode):
        return BLANK_NODE_PREFIX + str(node)
    return str(node)


def node_sort_key(node: Node) -> Tuple[int, str, str, str]:
    """Total ordering key over terms of mixed kinds."""
    if isinstance(node, Literal):
        datatype = str(node.datatype) if node.datatype is not None else ""
        language = node.language or ""
        return (_KIND_RANK[Literal], str(node), datatype, language)
    if isinstance(node, BNode):
        return (_KIND_RANK[BNode], node_id(node), "", "")
    return (_KIND_RANK[URIRef], str(node), "", "")
