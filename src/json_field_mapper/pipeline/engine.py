"""Mapping engine: applies a rule list to a source document."""
import copy
from typing import Any, Optional

import structlog

from json_field_mapper.models.errors import MalformedInput, MappingError, MissingRules, MissingSource
from json_field_mapper.models.schemas import MapInput, MapOptions, MappingRule
from json_field_mapper.models.values import NOT_FOUND, Document, has_field
from json_field_mapper.resolvers.path_resolver import resolve_rule
from json_field_mapper.rules.parser import parse_rules
from json_field_mapper.transformers.registry import TransformationRegistry

logger = structlog.get_logger()


class FieldMapper:
    """Populate destination documents from source documents by rules."""

    def __init__(
        self,
        options: Optional[MapOptions] = None,
        registry: Optional[TransformationRegistry] = None,
    ):
        """Initialize mapper.

        Args:
            options: Mapping options; defaults apply when omitted
            registry: Base transformation registry; built-ins when omitted
        """
        self.options = options or MapOptions()
        self.base_registry = registry or TransformationRegistry.default()

    def build_registry(self) -> TransformationRegistry:
        """Build the invocation-local registry, caller transforms last."""
        overrides = {t.name: t.function for t in self.options.transformations}
        return self.base_registry.with_overrides(overrides)

    def map(self, source: Optional[Document], destination: Optional[Document], rules_text: Optional[str]) -> Document:
        """Map source fields into destination.

        Args:
            source: Source document
            destination: Destination document, mutated in place; new when None
            rules_text: JSON array of rule objects

        Returns:
            The destination document

        Raises:
            MissingSource: if source is None
            MissingRules: if rules_text is empty
            MalformedInput: if rules_text or a document has the wrong shape
            InvalidRule: if a rule has no From reference
            UnknownTransformation: if a rule names an unregistered transform
            TransformationFailed: if a transform rejected its input
        """
        if source is None:
            raise MissingSource()
        if not isinstance(rules_text, str) or not rules_text:
            raise MissingRules()
        if not isinstance(source, dict):
            raise MalformedInput(f"Source object must be a JSON object, got {type(source).__name__}")
        if destination is None:
            destination = {}
        elif not isinstance(destination, dict):
            raise MalformedInput(
                f"Destination object must be a JSON object, got {type(destination).__name__}"
            )

        index: Optional[int] = None
        written = 0
        try:
            rules = parse_rules(rules_text)
            registry = self.build_registry()
            logger.info("Mapping started", rules=len(rules))
            for index, rule in enumerate(rules):
                if self._apply_rule(index, rule, source, destination, registry):
                    written += 1
        except MappingError as e:
            logger.error("Mapping failed", rule=index, error=str(e), error_type=type(e).__name__)
            raise

        logger.info("Mapping completed", rules=len(rules), written=written)
        return destination

    def _apply_rule(
        self,
        index: int,
        rule: MappingRule,
        source: Document,
        destination: Document,
        registry: TransformationRegistry,
    ) -> bool:
        """Apply one rule. Returns True when a field was written."""
        if rule.keep_existing_value and has_field(destination, rule.destination):
            logger.debug("Keeping existing value", rule=index, field=rule.destination)
            return False

        value = resolve_rule(source, rule)
        if value is NOT_FOUND:
            if rule.default_present:
                destination[rule.destination] = copy.deepcopy(rule.default)
                return True
            logger.debug("Source not found, skipping", rule=index, source=rule.source_text)
            return False

        value = copy.deepcopy(self._unpack(value))
        value = registry.apply_chain(rule.transformations, value)
        destination[rule.destination] = value
        return True

    def _unpack(self, value: Any) -> Any:
        """Replace a wrapped text node with its text content when enabled."""
        if not self.options.unpack_text_content or not isinstance(value, dict):
            return value
        if self.options.text_content_field in value:
            return value[self.options.text_content_field]
        return value


def map_document(
    source: Optional[Document],
    destination: Optional[Document],
    rules_text: Optional[str],
    options: Optional[MapOptions] = None,
    registry: Optional[TransformationRegistry] = None,
) -> Document:
    """Map source into destination with a one-off FieldMapper."""
    return FieldMapper(options=options, registry=registry).map(source, destination, rules_text)


def run(map_input: MapInput, options: Optional[MapOptions] = None) -> Document:
    """Run a mapping from a MapInput; a missing destination is created."""
    return map_document(
        map_input.source_object,
        map_input.destination_object,
        map_input.map,
        options=options,
    )

