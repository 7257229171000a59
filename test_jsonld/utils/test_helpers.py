"""Test Helper Functions

Utility functions to support JSON-LD package testing.
"""

import json
import logging
from typing import Dict, List, Any, Optional, Set

from rdfjsonld.jsonld.processor import JsonLdProcessor


def setup_test_logging():
    """Set up logging for tests."""
    logging.basicConfig(
        level=logging.DEBUG,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def serialize(quads, use_rdf_type: bool = False, use_native_types: bool = False) -> List[Dict[str, Any]]:
    """Run from_rdf and parse the JSON text back into Python objects."""
    text = JsonLdProcessor().from_rdf(quads, use_rdf_type, use_native_types)
    return json.loads(text)


def top_level_ids(nodes: List[Dict[str, Any]]) -> Set[str]:
    """Collect the @id of every top-level node object."""
    return {node["@id"] for node in nodes}


def find_node(nodes: List[Dict[str, Any]], node_id: str) -> Optional[Dict[str, Any]]:
    """Find a node object by @id.

    Args:
        nodes: Node objects to search
        node_id: @id to look for

    Returns:
        The node object or None
    """
    for node in nodes:
        if node.get("@id") == node_id:
            return node
    return None
