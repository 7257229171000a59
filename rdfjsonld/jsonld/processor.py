"""JSON-LD Processor

Serializes RDF quads as a JSON-LD node array.

Quads are partitioned by graph. Each graph is processed on its own: RDF lists
are reconstructed, the remaining subjects are serialized in identifier order
and named graphs are wrapped in a {"@id", "@graph"} object. The per-graph
results are then merged by @id, default graph first and named graphs in
identifier order, so the output does not depend on the input order.
"""

import json
import logging
from typing import Dict, List, Any, Iterable, Optional, Tuple, Union

from ..model.jsonld_model import JsonLdDocument, ProcessorOptions
from ..model.quad_model import Quad, Node, node_id
from .entity_serializer import EntitySerializer
from .keywords import ID, GRAPH
from .list_reconstructor import ListReconstructor

logger = logging.getLogger(__name__)

QuadInput = Union[Quad, Tuple[Any, ...]]


def merge_node_object(existing: Dict[str, Any], new: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge a node object into another with the same @id.

    Keys missing from ``existing`` are added. When both sides hold a list the
    lists are concatenated in order, duplicates included. Any other value in
    ``new`` replaces the existing one.

    Args:
        existing: Node object already in the result; updated in place
        new: Node object to merge in

    Returns:
        The updated ``existing`` object
    """
    for key, value in new.items():
        if key not in existing:
            existing[key] = value
        elif isinstance(existing[key], list) and isinstance(value, list):
            existing[key] = existing[key] + value
        else:
            existing[key] = value
    return existing


def _group_by_graph(quads: Iterable[QuadInput]) -> Dict[Optional[Node], List[Quad]]:
    """Partition quads by graph name, dropping exact duplicates."""
    graphs: Dict[Optional[Node], Dict[Quad, None]] = {}
    for statement in quads:
        quad = Quad.of(statement)
        graphs.setdefault(quad.graph, {})[quad] = None
    return {name: list(members) for name, members in graphs.items()}


def _graph_order(graph_name: Optional[Node]) -> Tuple[int, str]:
    if graph_name is None:
        return (0, "")
    return (1, node_id(graph_name))


class JsonLdProcessor:
    """Converts RDF quads to JSON-LD text."""

    def __init__(self, options: Optional[ProcessorOptions] = None):
        """
        Args:
            options: Default serialization options; individual calls may
                override the type flags
        """
        self.options = options or ProcessorOptions()

    def from_rdf(self, quads: Iterable[QuadInput],
                 use_rdf_type: Optional[bool] = None,
                 use_native_types: Optional[bool] = None) -> str:
        """
        Serialize quads as a JSON-LD array.

        Args:
            quads: Quads (or 3/4-tuples of rdflib terms)
            use_rdf_type: Emit rdf:type as a property instead of @type
            use_native_types: Coerce boolean, integer and double literals

        Returns:
            JSON text of the top-level node array
        """
        nodes = self.from_rdf_nodes(quads, use_rdf_type, use_native_types)
        return json.dumps(nodes, indent=self.options.indent, ensure_ascii=False)

    def from_rdf_nodes(self, quads: Iterable[QuadInput],
                       use_rdf_type: Optional[bool] = None,
                       use_native_types: Optional[bool] = None) -> List[Dict[str, Any]]:
        """Same as from_rdf, returning the node array as Python objects."""
        if use_rdf_type is None:
            use_rdf_type = self.options.use_rdf_type
        if use_native_types is None:
            use_native_types = self.options.use_native_types

        subject_map: Dict[str, Dict[str, Any]] = {}
        graphs = _group_by_graph(quads)

        for graph_name in sorted(graphs, key=_graph_order):
            for node in self._serialize_graph(graph_name, graphs[graph_name], use_rdf_type, use_native_types):
                node_key = node[ID]
                if node_key in subject_map:
                    merge_node_object(subject_map[node_key], node)
                else:
                    subject_map[node_key] = node

        logger.debug(f"Serialized {len(graphs)} graphs into {len(subject_map)} top-level nodes")
        return list(subject_map.values())

    def from_rdf_document(self, quads: Iterable[QuadInput],
                          context: Optional[Any] = None,
                          use_rdf_type: Optional[bool] = None,
                          use_native_types: Optional[bool] = None) -> JsonLdDocument:
        """Serialize quads into a JsonLdDocument with an optional @context."""
        nodes = self.from_rdf_nodes(quads, use_rdf_type, use_native_types)
        return JsonLdDocument(context=context, graph=nodes)

    def flatten(self, json_text: str, jsonld_context: Optional[str] = None) -> str:
        """Placeholder for JSON-LD flattening; returns the input unchanged."""
        return json_text

    def compact(self, json_text: str, jsonld_context: Optional[str] = None) -> str:
        """Placeholder for JSON-LD compaction; returns the input unchanged."""
        return json_text

    def _serialize_graph(self, graph_name: Optional[Node], quads: List[Quad],
                         use_rdf_type: bool, use_native_types: bool) -> List[Dict[str, Any]]:
        """Serialize the subjects of one graph, wrapped when the graph is named."""
        lists = ListReconstructor(use_native_types).reconstruct(quads)
        serializer = EntitySerializer(lists, use_rdf_type, use_native_types)

        by_subject: Dict[Node, List[Quad]] = {}
        for quad in quads:
            if quad.subject in lists.consumed:
                continue
            by_subject.setdefault(quad.subject, []).append(quad)

        entities = [
            serializer.serialize(subject, by_subject[subject])
            for subject in sorted(by_subject, key=node_id)
        ]

        if graph_name is None:
            return entities

        logger.debug(f"Graph {node_id(graph_name)}: {len(entities)} entities, {len(lists.lists)} lists")
        return [{ID: node_id(graph_name), GRAPH: entities}]


def from_rdf(quads: Iterable[QuadInput],
             use_rdf_type: bool = False,
             use_native_types: bool = False) -> str:
    """Serialize quads with a default JsonLdProcessor."""
    return JsonLdProcessor().from_rdf(quads, use_rdf_type, use_native_types)
