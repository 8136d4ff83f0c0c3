"""Run driver: feeds candidate interfaces through inference into a registry.

    processor = build_processor(load_config())
    catalog = processor.process_all(interfaces)

The processor owns exactly one registry, created for the run. Nothing is
shared between runs.
"""

from __future__ import annotations

import fnmatch
import logging
from typing import Callable, Iterable, Optional, Sequence

from .config import GeneratorConfig
from .diagnostics import DiagnosticSink, LoggingDiagnosticSink
from .exceptions import InitializationError
from .inference import FieldInferenceEngine
from .models import EventCatalog, EventDescriptor, InterfaceDef
from .registry import EventRegistry
from .types import TypeResolver, resolve_type_name

logger = logging.getLogger(__name__)

InclusionPolicy = Callable[[InterfaceDef], bool]


class PathPatternPolicy:
    """Includes interfaces whose source file matches the configured globs.

    Interfaces without a known source file are always included.
    """

    def __init__(self, include: Sequence[str] = ("*",), exclude: Sequence[str] = ()) -> None:
        self.include = list(include)
        self.exclude = list(exclude)

    def __call__(self, interface: InterfaceDef) -> bool:
        path = interface.source_file
        if path is None:
            return True
        path = path.replace("\\", "/")
        if any(fnmatch.fnmatch(path, pattern) for pattern in self.exclude):
            return False
        return any(fnmatch.fnmatch(path, pattern) for pattern in self.include)


def include_all(interface: InterfaceDef) -> bool:
    return True


class EventInterfaceProcessor:
    """Processes event interfaces for one analysis run.

    Args:
        engine: Field inference engine
        registry: Registry receiving the inferred events
        inclusion_policy: Predicate deciding which interfaces are analyzed

    Raises:
        InitializationError: If a collaborator is missing
    """

    def __init__(
        self,
        engine: FieldInferenceEngine,
        registry: EventRegistry,
        inclusion_policy: InclusionPolicy = include_all,
    ) -> None:
        if engine is None:
            raise InitializationError("engine", "a FieldInferenceEngine is required")
        if engine.diagnostics is None:
            raise InitializationError("diagnostics", "the engine has no diagnostic sink")
        if engine.override_annotation is None:
            raise InitializationError(
                "override_annotation", "use an empty string to disable overrides"
            )
        if registry is None:
            raise InitializationError("registry", "an EventRegistry is required")
        if inclusion_policy is None or not callable(inclusion_policy):
            raise InitializationError("inclusion_policy", "expected a predicate over interfaces")

        self.engine = engine
        self.registry = registry
        self.inclusion_policy = inclusion_policy
        self.skipped: list[str] = []

    def is_to_be_processed(self, interface: InterfaceDef) -> bool:
        return bool(self.inclusion_policy(interface))

    def process(self, interface: InterfaceDef) -> EventDescriptor:
        """Infer and record a single interface."""
        fields = self.engine.infer(interface)
        return self.registry.record(interface.qualified_name, fields)

    def process_all(self, interfaces: Iterable[InterfaceDef]) -> EventCatalog:
        """Process every included interface and return the ordered catalog.

        Raises:
            MalformedExplicitFieldError: Aborts the run on a malformed override
        """
        processed = 0
        for interface in interfaces:
            if not self.is_to_be_processed(interface):
                logger.debug("Skipping %s (not included)", interface.qualified_name)
                self.skipped.append(interface.qualified_name)
                continue
            self.process(interface)
            processed += 1

        logger.info("Processed %d event interface(s), skipped %d", processed, len(self.skipped))
        return self.registry.snapshot()


def build_processor(
    config: GeneratorConfig,
    diagnostics: Optional[DiagnosticSink] = None,
    resolve_type: TypeResolver = resolve_type_name,
) -> EventInterfaceProcessor:
    """Wire a processor (with a fresh registry) from configuration."""
    if config is None:
        raise InitializationError("config", "a GeneratorConfig is required")
    if not config.overrides_enabled:
        logger.debug("No override annotation configured; all fields are inferred")
    engine = FieldInferenceEngine(
        override_annotation=config.override_annotation,
        diagnostics=diagnostics if diagnostics is not None else LoggingDiagnosticSink(),
        resolve_type=resolve_type,
    )
    policy = PathPatternPolicy(config.include_patterns, config.exclude_patterns)
    return EventInterfaceProcessor(engine, EventRegistry(), policy)
