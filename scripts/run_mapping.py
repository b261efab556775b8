"""Script to map a JSON document with a rule list."""
import argparse
import json
import sys
from pathlib import Path

import structlog

# Configure structured logging
structlog.configure(
    processors=[
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        structlog.processors.JSONRenderer()
    ],
    logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
)

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from json_field_mapper.models.errors import MappingError
from json_field_mapper.models.schemas import CustomTransformation
from json_field_mapper.pipeline.engine import map_document
from json_field_mapper.pipeline.settings import options_from_env

logger = structlog.get_logger()


def parse_transformation(text: str) -> CustomTransformation:
    """Parse a NAME=module:function argument."""
    name, sep, reference = text.partition("=")
    if not sep or not name or not reference:
        raise argparse.ArgumentTypeError(
            f"Expected NAME=module:function, got {text!r}"
        )
    try:
        return CustomTransformation(name=name, function=reference)
    except Exception as e:
        raise argparse.ArgumentTypeError(f"Cannot load transformation {text!r}: {e}")


def load_json(path: str):
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Map fields from a source JSON document into a destination document"
    )
    parser.add_argument(
        "source",
        help="Source JSON document"
    )
    rules = parser.add_mutually_exclusive_group(required=True)
    rules.add_argument(
        "--map",
        help="File containing the JSON rule list"
    )
    rules.add_argument(
        "--map-text",
        help="Inline JSON rule list"
    )
    parser.add_argument(
        "--destination",
        help="Existing destination JSON document to populate"
    )
    parser.add_argument(
        "--unpack-text-content",
        action="store_true",
        default=None,
        help="Replace wrapped text nodes with their text content"
    )
    parser.add_argument(
        "--text-content-field",
        help="Child field holding wrapped text (default: #cdata-section)"
    )
    parser.add_argument(
        "--transformation",
        action="append",
        type=parse_transformation,
        default=[],
        metavar="NAME=module:function",
        help="Register a custom transformation (repeatable)"
    )
    parser.add_argument(
        "--output",
        help="Output JSON file (default: stdout)"
    )

    args = parser.parse_args()

    source = load_json(args.source)
    destination = load_json(args.destination) if args.destination else None
    rules_text = Path(args.map).read_text(encoding="utf-8") if args.map else args.map_text

    options = options_from_env(
        unpack_text_content=args.unpack_text_content,
        text_content_field=args.text_content_field,
        transformations=args.transformation,
    )

    try:
        result = map_document(source, destination, rules_text, options=options)
    except MappingError as e:
        logger.error("Mapping aborted", error=str(e), error_type=type(e).__name__)
        sys.exit(1)

    output = json.dumps(result, indent=2, ensure_ascii=False)
    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(output + "\n", encoding="utf-8")
        logger.info("Mapped document saved", output=str(output_path), fields=len(result))
    else:
        print(output)


if __name__ == "__main__":
    main()
