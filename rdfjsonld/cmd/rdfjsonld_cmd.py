#!/usr/bin/env python3
"""
rdf-jsonld Command Line Interface

Converts an RDF file (Turtle, N-Triples, N-Quads, TriG, RDF/XML, N3 or
JSON-LD, optionally gzipped) into a JSON-LD node array.
"""

import argparse
import json
import logging
import sys
from typing import Optional, List

from rdfjsonld import __version__
from rdfjsonld.config.config_loader import get_config, reload_config, ConfigurationError
from rdfjsonld.jsonld.processor import JsonLdProcessor
from rdfjsonld.rdf.rdf_utils import RDFFormat, RDFLoadError, load_quads, iter_graph_names

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments for the converter."""
    parser = argparse.ArgumentParser(
        description="rdf-jsonld - serialize RDF quads as JSON-LD",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  rdfjsonld data.ttl                        # Print JSON-LD to stdout
  rdfjsonld data.nq.gz -o data.jsonld       # Write to a file
  rdfjsonld data.trig --use-native-types    # Emit booleans and numbers as JSON values
  rdfjsonld data.nt --context '{"ex": "http://example.org/"}'
        """
    )

    parser.add_argument("input", help="RDF file to convert")

    parser.add_argument(
        "--format", "-f",
        choices=[f.value for f in RDFFormat],
        help="Input format (auto-detected from extension and content if omitted)"
    )

    parser.add_argument(
        "--output", "-o",
        help="Write JSON-LD to this file instead of stdout"
    )

    parser.add_argument(
        "--use-rdf-type",
        action="store_true",
        default=None,
        help="Emit rdf:type as a property instead of @type"
    )

    parser.add_argument(
        "--use-native-types",
        action="store_true",
        default=None,
        help="Coerce xsd:boolean, integer and xsd:double literals to JSON values"
    )

    parser.add_argument(
        "--indent",
        type=int,
        help="JSON indentation (overrides configuration)"
    )

    parser.add_argument(
        "--context",
        help="JSON @context to attach; output becomes a {@context, @graph} document"
    )

    parser.add_argument(
        "--config", "-c",
        help="Path to rdfjsonld-config.yaml"
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (overrides configuration)"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"rdf-jsonld {__version__}"
    )

    return parser.parse_args(argv)


def convert(args: argparse.Namespace) -> str:
    """
    Run a conversion described by parsed arguments.

    Raises:
        ConfigurationError: If configuration or --context is invalid
        RDFLoadError: If the input cannot be loaded
    """
    config = get_config(args.config)
    options = config.get_processor_options()
    if args.indent is not None:
        options = options.model_copy(update={'indent': args.indent})

    context = None
    if args.context:
        try:
            context = json.loads(args.context)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid --context JSON: {e}") from e

    rdf_format = RDFFormat(args.format) if args.format else None
    quads = load_quads(args.input, rdf_format)
    logger.info(f"Converting {len(quads)} quads across {len(list(iter_graph_names(quads)))} named graphs")

    processor = JsonLdProcessor(options)
    if context is None:
        return processor.from_rdf(quads, args.use_rdf_type, args.use_native_types)

    document = processor.from_rdf_document(quads, context, args.use_rdf_type, args.use_native_types)
    return json.dumps(document.to_jsonld(), indent=options.indent, ensure_ascii=False)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the rdfjsonld command-line interface."""
    args = parse_args(argv)

    try:
        config = reload_config(args.config)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=args.log_level or config.get_log_level(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )

    try:
        output = convert(args)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1
    except RDFLoadError as e:
        print(f"Error loading RDF: {e}", file=sys.stderr)
        return 1

    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(output)
            f.write("\n")
        logger.info(f"Wrote JSON-LD to {args.output}")
    else:
        sys.stdout.write(output)
        sys.stdout.write("\n")

    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
