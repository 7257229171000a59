"""rdf-jsonld: serialize RDF quads as JSON-LD."""

from .model.quad_model import Quad, node_id
from .model.jsonld_model import JsonLdDocument, ProcessorOptions
from .jsonld.processor import JsonLdProcessor, from_rdf

__version__ = "0.1.0"
