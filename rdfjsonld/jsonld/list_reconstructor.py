"""List Reconstructor

Finds RDF collections (blank nodes chained through rdf:first / rdf:rest and
terminated by rdf:nil) in the quads of one graph and rebuilds them as ordered
JSON-LD value sequences.

Chains are walked backwards from their rdf:nil tail with an explicit loop.
A chain that contains a malformed cell, or a cell referenced by more than one
rdf:rest, is left alone and its nodes serialize as ordinary entities.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Any, FrozenSet, Iterable, Optional, Set, Tuple

from rdflib import BNode, Literal

from ..model.quad_model import Quad, Node, node_id
from .keywords import ID, LIST, RDF_FIRST, RDF_REST, RDF_NIL, RDF_TYPE
from .literal_codec import literal_to_jsonld

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReconstructedLists:
    """Lists found in one graph."""
    lists: Dict[Node, List[Dict[str, Any]]] = field(default_factory=dict)
    consumed: FrozenSet[Node] = frozenset()

    def get(self, head: Node) -> Optional[List[Dict[str, Any]]]:
        return self.lists.get(head)


class ListReconstructor:
    """Rebuilds the RDF lists of a single graph."""

    def __init__(self, use_native_types: bool = False):
        self.use_native_types = use_native_types

    def reconstruct(self, quads: Iterable[Quad]) -> ReconstructedLists:
        """
        Find and serialize every well-formed list in the given quads.

        Args:
            quads: Quads of one graph, without duplicates

        Returns:
            ReconstructedLists mapping each list head to its serialized
            values, and the set of blank nodes absorbed into lists
        """
        quads = list(quads)
        by_subject: Dict[Node, List[Quad]] = {}
        rest_referrers: Dict[Node, List[Node]] = {}

        for quad in quads:
            by_subject.setdefault(quad.subject, []).append(quad)
            if quad.predicate == RDF_REST:
                rest_referrers.setdefault(quad.object, []).append(quad.subject)

        tails = sorted(
            {q.subject for q in quads
             if isinstance(q.subject, BNode) and q.predicate == RDF_REST and q.object == RDF_NIL},
            key=node_id
        )

        chains: Dict[Node, List[Node]] = {}
        consumed: Set[Node] = set()

        for tail in tails:
            found = self._walk_chain(tail, by_subject, rest_referrers)
            if found is None:
                continue
            head, items, cells = found
            chains[head] = items
            consumed.update(cells)

        if chains:
            logger.debug(f"Reconstructed {len(chains)} lists from {len(tails)} candidate tails")

        return ReconstructedLists(
            lists=self._serialize_chains(chains),
            consumed=frozenset(consumed)
        )

    def _walk_chain(self, tail: Node,
                    by_subject: Dict[Node, List[Quad]],
                    rest_referrers: Dict[Node, List[Node]]) -> Optional[Tuple[Node, List[Node], List[Node]]]:
        """Walk from a tail cell to the list head. Returns None when the chain is not a clean list."""
        items: List[Node] = []
        cells: List[Node] = []
        current = tail

        while True:
            cell_quads = by_subject.get(current, [])
            extra = sum(1 for q in cell_quads if q.predicate != RDF_TYPE)
            first_values = [q.object for q in cell_quads if q.predicate == RDF_FIRST]

            if extra != 2 or len(first_values) != 1:
                logger.debug(f"List cell {node_id(current)} is malformed, leaving chain from {node_id(tail)} as entities")
                return None

            items.append(first_values[0])
            cells.append(current)

            predecessors = rest_referrers.get(current, [])
            if not predecessors:
                break
            if len(predecessors) > 1:
                logger.debug(f"List cell {node_id(current)} has {len(predecessors)} predecessors, leaving chain from {node_id(tail)} as entities")
                return None

            predecessor = predecessors[0]
            if not isinstance(predecessor, BNode):
                break
            current = predecessor

        items.reverse()
        return current, items, cells

    def _serialize_chains(self, chains: Dict[Node, List[Node]]) -> Dict[Node, List[Dict[str, Any]]]:
        """Serialize list items, resolving nested lists innermost first."""
        resolved: Dict[Node, List[Dict[str, Any]]] = {}

        for head in sorted(chains, key=node_id):
            if head in resolved:
                continue

            entered: Set[Node] = set()
            stack: List[Tuple[Node, bool]] = [(head, False)]

            while stack:
                current, expanded = stack.pop()
                if current in resolved:
                    continue
                if expanded:
                    resolved[current] = [self._serialize_item(item, resolved) for item in chains[current]]
                    continue

                entered.add(current)
                stack.append((current, True))
                for item in chains[current]:
                    if item in chains and item not in resolved and item not in entered:
                        stack.append((item, False))

        return resolved

    def _serialize_item(self, item: Node, resolved: Dict[Node, List[Dict[str, Any]]]) -> Dict[str, Any]:
        if isinstance(item, Literal):
            return literal_to_jsonld(item, self.use_native_types)
        if item in resolved:
            return {LIST: resolved[item]}
        if item == RDF_NIL:
            return {LIST: []}
        # plain resources, and lists nested inside themselves
        return {ID: node_id(item)}
