"""Entity Serializer

Serializes the quads of one subject within one graph into a JSON-LD node
object.
"""

from typing import Dict, List, Any, Iterable, Optional

from rdflib import Literal

from ..model.quad_model import Quad, Node, node_id, node_sort_key
from .keywords import ID, TYPE, LIST, RDF_NIL, RDF_TYPE, TYPE_PREDICATE
from .list_reconstructor import ReconstructedLists
from .literal_codec import literal_to_jsonld


class EntitySerializer:
    """Builds node objects for the subjects of one graph."""

    def __init__(self, lists: Optional[ReconstructedLists] = None,
                 use_rdf_type: bool = False,
                 use_native_types: bool = False):
        """
        Args:
            lists: Lists reconstructed from the same graph
            use_rdf_type: Keep rdf:type as a property; the @type slot is then
                fed only by the "@type" pseudo-predicate
            use_native_types: Coerce supported literal datatypes to JSON natives
        """
        self.lists = lists or ReconstructedLists()
        self.use_rdf_type = use_rdf_type
        self.use_native_types = use_native_types

    def serialize(self, subject: Node, quads: Iterable[Quad]) -> Dict[str, Any]:
        """
        Serialize one subject.

        Args:
            subject: Subject node
            quads: Quads of the graph; only those with this subject are used

        Returns:
            Node object with @id first, then @type, then properties sorted by IRI
        """
        types: List[Node] = []
        properties: Dict[str, List[Node]] = {}

        for quad in quads:
            if quad.subject != subject:
                continue
            if self._is_type_slot(quad.predicate):
                types.append(quad.object)
            else:
                properties.setdefault(str(quad.predicate), []).append(quad.object)

        result: Dict[str, Any] = {ID: node_id(subject)}

        if types:
            result[TYPE] = [node_id(t) for t in sorted(types, key=node_sort_key)]

        for predicate in sorted(properties):
            objects = sorted(properties[predicate], key=node_sort_key)
            result[predicate] = [self.serialize_object(o) for o in objects]

        return result

    def serialize_object(self, obj: Node) -> Dict[str, Any]:
        """Serialize one object value."""
        if isinstance(obj, Literal):
            return literal_to_jsonld(obj, self.use_native_types)

        values = self.lists.get(obj)
        if values is not None:
            return {LIST: values}

        if obj == RDF_NIL:
            return {LIST: []}

        return {ID: node_id(obj)}

    def _is_type_slot(self, predicate: Node) -> bool:
        if predicate == TYPE_PREDICATE:
            return True
        return predicate == RDF_TYPE and not self.use_rdf_type
