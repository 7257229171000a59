"""JSON-LD Model Classes

Pydantic models for JSON-LD documents and for the options that drive
RDF to JSON-LD serialization.
"""

from typing import Dict, List, Any, Optional, Union
from pydantic import BaseModel, ConfigDict, Field


class JsonLdDocument(BaseModel):
    """
    JSON-LD document with an optional @context and a @graph array.

    Node objects inside @graph are kept as plain dictionaries in the order
    the serializer produced them.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    context: Optional[Union[str, Dict[str, Any], List[Union[str, Dict[str, Any]]]]] = Field(
        None,
        alias="@context",
        description="JSON-LD context defining term mappings and namespaces"
    )
    graph: List[Dict[str, Any]] = Field(
        default_factory=list,
        alias="@graph",
        description="Array of JSON-LD node objects"
    )

    def to_jsonld(self) -> Dict[str, Any]:
        """Dump with JSON-LD keyword names, omitting an unset @context."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ProcessorOptions(BaseModel):
    """Options for converting quads to JSON-LD."""
    model_config = ConfigDict(extra="forbid")

    use_rdf_type: bool = Field(
        False,
        description="Emit rdf:type as an ordinary property instead of @type"
    )
    use_native_types: bool = Field(
        False,
        description="Coerce xsd:boolean, integer and xsd:double literals to JSON natives"
    )
    indent: Optional[int] = Field(
        2,
        ge=0,
        description="JSON indentation; None writes compact single-line output"
    )
