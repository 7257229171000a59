"""
File Utilities for rdf-jsonld

Provides RDF file type detection and compressed file handling.
"""

from pathlib import Path
from typing import Optional
from enum import Enum


class FileType(Enum):
    """Supported file types for detection."""
    # RDF formats
    RDF_TURTLE = "turtle"
    RDF_XML = "xml"
    RDF_N3 = "n3"
    RDF_NT = "nt"
    RDF_JSON_LD = "json-ld"
    RDF_TRIG = "trig"
    RDF_NQUADS = "nquads"

    # Compressed
    GZIP = "gzip"

    # Unknown
    UNKNOWN = "unknown"


RDF_EXTENSION_MAP = {
    '.ttl': FileType.RDF_TURTLE,
    '.turtle': FileType.RDF_TURTLE,
    '.rdf': FileType.RDF_XML,
    '.owl': FileType.RDF_XML,
    '.xml': FileType.RDF_XML,
    '.n3': FileType.RDF_N3,
    '.nt': FileType.RDF_NT,
    '.jsonld': FileType.RDF_JSON_LD,
    '.json': FileType.RDF_JSON_LD,  # Could be regular JSON too
    '.trig': FileType.RDF_TRIG,
    '.nq': FileType.RDF_NQUADS,
    '.nquads': FileType.RDF_NQUADS
}


def get_file_extension(file_path: str, handle_compressed: bool = True) -> str:
    """
    Get the file extension, handling compressed files appropriately.

    Args:
        file_path: Path to the file
        handle_compressed: If True, for compressed files like .nt.gz, return .nt
                          If False, return .gz

    Returns:
        File extension (with leading dot)
    """
    path = Path(file_path)

    if handle_compressed and path.suffix.lower() == '.gz' and len(path.suffixes) >= 2:
        # For files like .nt.gz, .nq.gz, return the extension before .gz
        return path.suffixes[-2].lower()
    else:
        return path.suffix.lower()


def is_gzip_file(file_path: str) -> bool:
    return Path(file_path).suffix.lower() == '.gz'


def detect_rdf_format(file_path: str, content_sample: Optional[str] = None) -> Optional[FileType]:
    """
    Detect RDF format from file extension and content.

    Args:
        file_path: Path to the RDF file
        content_sample: Optional sample of file content for content-based detection

    Returns:
        Detected RDF FileType or None if not an RDF file
    """
    extension = get_file_extension(file_path, handle_compressed=True)
    detected_format = RDF_EXTENSION_MAP.get(extension)

    # If we have content sample, try to refine detection
    if content_sample and detected_format is None:
        content_lower = content_sample.lower().strip()

        # Check for XML/RDF patterns
        if content_lower.startswith('<?xml') or '<rdf:' in content_lower:
            detected_format = FileType.RDF_XML
        # Check for JSON-LD patterns
        elif content_lower.startswith(('{', '[')) and '@' in content_lower:
            detected_format = FileType.RDF_JSON_LD
        # Check for Turtle patterns
        elif '@prefix' in content_lower or content_lower.startswith('@base'):
            detected_format = FileType.RDF_TURTLE
        # N-Quads lines carry a fourth term before the final dot
        elif content_lower.startswith(('<', '_:')) and _looks_like_nquads(content_lower):
            detected_format = FileType.RDF_NQUADS
        # Check for N-Triples patterns (simple heuristic)
        elif '.' in content_lower and '<' in content_lower and '>' in content_lower:
            detected_format = FileType.RDF_NT

    return detected_format


def _looks_like_nquads(content: str) -> bool:
    first_line = content.splitlines()[0].strip()
    if not first_line.endswith('.'):
        return False
    body = first_line[:-1].rstrip()
    if not body.endswith('>'):
        return False

    # Drop the trailing <...> term and look at what precedes it
    remaining = body[:body.rfind('<')].rstrip()
    if remaining.endswith('^^'):
        return False
    if '"' in remaining:
        return True
    return remaining.count('<') + remaining.count('_:') >= 3
