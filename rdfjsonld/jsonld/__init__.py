from .processor import JsonLdProcessor, merge_node_object, from_rdf
from .list_reconstructor import ListReconstructor, ReconstructedLists
from .entity_serializer import EntitySerializer
from .literal_codec import literal_to_jsonld, to_native
