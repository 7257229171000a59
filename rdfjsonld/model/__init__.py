from .quad_model import Quad, Node, node_id, node_sort_key
from .jsonld_model import JsonLdDocument, ProcessorOptions
