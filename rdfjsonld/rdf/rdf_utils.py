"""
RDF Utilities for rdf-jsonld

Loads RDF graphs, datasets and files into the Quad model consumed by the
JSON-LD processor.
"""

import gzip
import logging
from pathlib import Path
from typing import Optional, List, Iterator
from enum import Enum

from rdflib import Graph, Dataset, URIRef, BNode
from rdflib.exceptions import ParserError
from rdflib.graph import DATASET_DEFAULT_GRAPH_ID
from rdflib.plugins.parsers.notation3 import BadSyntax

from ..model.quad_model import Quad, Node
from ..utils.file_utils import FileType, is_gzip_file, detect_rdf_format as _detect_rdf_format

logger = logging.getLogger(__name__)


class RDFFormat(Enum):
    """Supported RDF formats."""
    TURTLE = "turtle"
    XML = "xml"
    N3 = "n3"
    NT = "nt"
    JSON_LD = "json-ld"
    TRIG = "trig"
    NQUADS = "nquads"

    @property
    def is_quad_format(self) -> bool:
        """Formats that can carry named graphs."""
        return self in (RDFFormat.TRIG, RDFFormat.NQUADS, RDFFormat.JSON_LD)


# Mapping between FileType and RDFFormat for compatibility
_FILETYPE_TO_RDFFORMAT = {
    FileType.RDF_TURTLE: RDFFormat.TURTLE,
    FileType.RDF_XML: RDFFormat.XML,
    FileType.RDF_N3: RDFFormat.N3,
    FileType.RDF_NT: RDFFormat.NT,
    FileType.RDF_JSON_LD: RDFFormat.JSON_LD,
    FileType.RDF_TRIG: RDFFormat.TRIG,
    FileType.RDF_NQUADS: RDFFormat.NQUADS,
}


class RDFLoadError(Exception):
    """Raised when RDF input cannot be located, detected or parsed."""
    pass


def detect_rdf_format(file_path: str, content_sample: Optional[str] = None) -> Optional[RDFFormat]:
    """Detect RDF format from file extension and content."""
    file_type = _detect_rdf_format(file_path, content_sample)
    return _FILETYPE_TO_RDFFORMAT.get(file_type)


def _graph_name(context) -> Optional[Node]:
    """Map an rdflib context (Graph or identifier) to a quad graph name."""
    identifier = context.identifier if isinstance(context, Graph) else context
    if identifier is None or identifier == DATASET_DEFAULT_GRAPH_ID:
        return None
    return identifier


def quads_from_graph(graph: Graph, graph_id: Optional[Node] = None) -> List[Quad]:
    """
    Convert the triples of an rdflib Graph to quads.

    Args:
        graph: rdflib Graph
        graph_id: Graph name to attach; None places the triples in the default graph

    Returns:
        List of Quad
    """
    return [Quad(s, p, o, graph_id) for s, p, o in graph]


def quads_from_dataset(dataset: Dataset) -> List[Quad]:
    """
    Convert the quads of an rdflib Dataset (or ConjunctiveGraph) to quads.

    The rdflib default graph becomes the default graph (None).
    """
    quads = []
    for s, p, o, context in dataset.quads((None, None, None, None)):
        quads.append(Quad(s, p, o, _graph_name(context)))
    return quads


def _read_sample(file_path: str) -> Optional[str]:
    opener = gzip.open if is_gzip_file(file_path) else open
    try:
        with opener(file_path, 'rt', encoding='utf-8', errors='ignore') as f:
            return f.read(1024)  # Read first 1KB for format detection
    except OSError as e:
        raise RDFLoadError(f"Unable to read {file_path}: {e}") from e


def _parse_into(target: Graph, file_path: str, rdf_format: RDFFormat) -> None:
    if is_gzip_file(file_path):
        with gzip.open(file_path, 'rb') as f:
            target.parse(source=f, format=rdf_format.value)
    else:
        target.parse(file_path, format=rdf_format.value)


def load_quads(file_path: str, rdf_format: Optional[RDFFormat] = None) -> List[Quad]:
    """
    Parse an RDF file (optionally gzipped) into quads.

    Triple formats load into the default graph; TriG, N-Quads and JSON-LD
    keep their named graphs.

    Args:
        file_path: Path to the RDF file
        rdf_format: Format to use, auto-detected if None

    Returns:
        List of Quad

    Raises:
        RDFLoadError: If the file is missing, the format cannot be detected
            or parsing fails
    """
    path = Path(file_path)
    if not path.is_file():
        raise RDFLoadError(f"File does not exist: {file_path}")

    if rdf_format is None:
        rdf_format = detect_rdf_format(file_path, _read_sample(file_path))
        if rdf_format is None:
            raise RDFLoadError(f"Unable to detect RDF format of {file_path}")

    logger.info(f"Loading {file_path} as {rdf_format.value}")

    try:
        if rdf_format.is_quad_format:
            dataset = Dataset()
            _parse_into(dataset, file_path, rdf_format)
            quads = quads_from_dataset(dataset)
        else:
            graph = Graph()
            _parse_into(graph, file_path, rdf_format)
            quads = quads_from_graph(graph)
    except (ParserError, BadSyntax, SyntaxError, ValueError, OSError) as e:
        raise RDFLoadError(f"Failed to parse {file_path} as {rdf_format.value}: {e}") from e

    blank_count = sum(1 for q in quads if isinstance(q.subject, BNode))
    logger.debug(f"Loaded {len(quads)} quads ({blank_count} with blank subjects) from {file_path}")
    return quads


def iter_graph_names(quads: List[Quad]) -> Iterator[URIRef]:
    """Yield the distinct named graphs of a quad list in first-seen order."""
    seen = set()
    for quad in quads:
        if quad.graph is not None and quad.graph not in seen:
            seen.add(quad.graph)
            yield quad.graph
