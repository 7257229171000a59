"""Literal Codec

Maps an RDF literal to its JSON-LD value object, optionally coercing
xsd:boolean, xsd:integer (and its derived types) and xsd:double to JSON
native values.
"""

import logging
import math
import re
from typing import Dict, Any, Optional, Union

from rdflib import Literal
from rdflib.namespace import XSD

from .keywords import VALUE, TYPE, LANGUAGE

logger = logging.getLogger(__name__)

NativeValue = Union[bool, int, float]

BOOLEAN_LEXICAL = {
    "true": True,
    "1": True,
    "false": False,
    "0": False,
}

INTEGER_DATATYPES = frozenset([
    XSD.integer,
    XSD.int,
    XSD.long,
    XSD.short,
    XSD.byte,
    XSD.nonNegativeInteger,
    XSD.nonPositiveInteger,
    XSD.negativeInteger,
    XSD.positiveInteger,
    XSD.unsignedByte,
    XSD.unsignedInt,
    XSD.unsignedLong,
    XSD.unsignedShort,
])

_INTEGER_PATTERN = re.compile(r"^[+-]?[0-9]+$")
_DOUBLE_PATTERN = re.compile(r"^[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?$")


def _to_boolean(lexical: str) -> Optional[bool]:
    return BOOLEAN_LEXICAL.get(lexical.strip())


def _to_integer(lexical: str) -> Optional[int]:
    lexical = lexical.strip()
    if not _INTEGER_PATTERN.match(lexical):
        return None
    try:
        return int(lexical)
    except ValueError:
        # digit count above sys.get_int_max_str_digits()
        return None


def _to_double(lexical: str) -> Optional[float]:
    lexical = lexical.strip()
    if not _DOUBLE_PATTERN.match(lexical):
        return None
    value = float(lexical)
    # JSON has no representation for inf/nan
    if not math.isfinite(value):
        return None
    return value


def to_native(literal: Literal) -> Optional[NativeValue]:
    """
    Coerce a typed literal to a Python native value.

    Args:
        literal: RDF literal

    Returns:
        bool, int or float when the datatype is supported and the lexical
        form parses, otherwise None
    """
    datatype = literal.datatype
    if datatype is None:
        return None

    lexical = str(literal)
    if datatype == XSD.boolean:
        return _to_boolean(lexical)
    if datatype in INTEGER_DATATYPES:
        return _to_integer(lexical)
    if datatype == XSD.double:
        return _to_double(lexical)
    return None


def literal_to_jsonld(literal: Literal, use_native_types: bool = False) -> Dict[str, Any]:
    """
    Convert a literal to a JSON-LD value object.

    Args:
        literal: RDF literal
        use_native_types: Coerce supported datatypes to JSON natives

    Returns:
        Value object with @value and, where applicable, @type or @language
    """
    lexical = str(literal)

    if literal.language is not None:
        return {VALUE: lexical, LANGUAGE: literal.language}

    if literal.datatype is None:
        return {VALUE: lexical}

    if use_native_types:
        native = to_native(literal)
        if native is not None:
            return {VALUE: native}
        logger.debug(f"No native coercion for {lexical!r} with datatype {literal.datatype}")

    return {VALUE: lexical, TYPE: str(literal.datatype)}
