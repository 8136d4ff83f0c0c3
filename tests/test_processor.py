"""Tests for the run driver."""

import logging

import pytest
from conftest import INT, LONG, OVERRIDE, make_interface, make_method, make_override

from event_fields.config import GeneratorConfig
from event_fields.diagnostics import CollectingDiagnosticSink
from event_fields.exceptions import InitializationError, MalformedExplicitFieldError
from event_fields.inference import FieldInferenceEngine
from event_fields.processor import (
    EventInterfaceProcessor,
    PathPatternPolicy,
    build_processor,
    include_all,
)
from event_fields.registry import EventRegistry


def make_processor(sink, policy=include_all):
    engine = FieldInferenceEngine(override_annotation=OVERRIDE, diagnostics=sink)
    return EventInterfaceProcessor(engine, EventRegistry(), policy)


class TestInitialization:
    def test_missing_engine(self):
        with pytest.raises(InitializationError) as exc_info:
            EventInterfaceProcessor(None, EventRegistry())
        assert exc_info.value.dependency == "engine"

    def test_missing_registry(self, engine):
        with pytest.raises(InitializationError) as exc_info:
            EventInterfaceProcessor(engine, None)
        assert exc_info.value.dependency == "registry"

    def test_missing_policy(self, engine):
        with pytest.raises(InitializationError) as exc_info:
            EventInterfaceProcessor(engine, EventRegistry(), None)
        assert exc_info.value.dependency == "inclusion_policy"

    def test_missing_override_identity(self, sink):
        engine = FieldInferenceEngine(diagnostics=sink)
        engine.override_annotation = None
        with pytest.raises(InitializationError) as exc_info:
            EventInterfaceProcessor(engine, EventRegistry())
        assert exc_info.value.dependency == "override_annotation"

    def test_missing_diagnostics(self, engine):
        engine.diagnostics = None
        with pytest.raises(InitializationError):
            EventInterfaceProcessor(engine, EventRegistry())

    def test_build_processor_requires_config(self):
        with pytest.raises(InitializationError):
            build_processor(None)


class TestProcessAll:
    def test_catalog_sorted(self, sink):
        processor = make_processor(sink)
        catalog = processor.process_all(
            [
                make_interface("b.Event", [make_method("getB", returns=INT)]),
                make_interface("a.Event", [make_method("getA", returns=LONG)]),
            ]
        )
        assert catalog.names == ["a.Event", "b.Event"]
        assert dict(catalog.get("b.Event").fields) == {"b": INT}

    def test_excluded_interfaces_skipped(self, sink):
        processor = make_processor(sink, policy=lambda i: not i.qualified_name.startswith("internal."))
        catalog = processor.process_all(
            [make_interface("internal.Event"), make_interface("api.Event")]
        )
        assert catalog.names == ["api.Event"]
        assert processor.skipped == ["internal.Event"]

    def test_malformed_override_aborts_run(self, sink):
        processor = make_processor(sink)
        interfaces = [
            make_interface("a.Event", annotations=[make_override("fooInt")]),
            make_interface("b.Event", [make_method("getB", returns=INT)]),
        ]
        with pytest.raises(MalformedExplicitFieldError):
            processor.process_all(interfaces)
        assert "b.Event" not in processor.registry

    def test_reprocessing_replaces_entry(self, sink):
        processor = make_processor(sink)
        processor.process(make_interface("a.Event", [make_method("getA", returns=INT)]))
        processor.process(make_interface("a.Event", [make_method("getB", returns=INT)]))
        catalog = processor.registry.snapshot()
        assert len(catalog) == 1
        assert list(catalog.get("a.Event").fields) == ["b"]


class TestPathPatternPolicy:
    def test_default_includes_everything(self):
        policy = PathPatternPolicy()
        assert policy(make_interface(source_file="src/a/Event.java"))

    def test_unknown_source_included(self):
        policy = PathPatternPolicy(include=["api/*"])
        assert policy(make_interface(source_file=None))

    def test_include_and_exclude(self):
        policy = PathPatternPolicy(include=["src/*"], exclude=["*/internal/*"])
        assert policy(make_interface(source_file="src/api/Event.java"))
        assert not policy(make_interface(source_file="src/internal/Event.java"))
        assert not policy(make_interface(source_file="test/Event.java"))

    def test_windows_separators(self):
        policy = PathPatternPolicy(include=["src/*"])
        assert policy(make_interface(source_file="src\\api\\Event.java"))


class TestBuildProcessor:
    def test_wires_config(self):
        config = GeneratorConfig(override_annotation=OVERRIDE, exclude_patterns=["*Internal*"])
        sink = CollectingDiagnosticSink()
        processor = build_processor(config, diagnostics=sink)

        assert processor.engine.override_annotation == OVERRIDE
        assert processor.engine.diagnostics is sink
        catalog = processor.process_all(
            [
                make_interface("a.Event", annotations=[make_override("x:long")], source_file="a/Event.java"),
                make_interface("b.Event", source_file="b/InternalEvent.java"),
            ]
        )
        assert catalog.names == ["a.Event"]
        assert dict(catalog.get("a.Event").fields) == {"x": LONG}

    def test_fresh_registry_per_processor(self):
        config = GeneratorConfig()
        first = build_processor(config)
        second = build_processor(config)
        first.process(make_interface("a.Event"))
        assert len(second.registry) == 0

    def test_disabled_overrides_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="event_fields.processor"):
            build_processor(GeneratorConfig())
        assert "all fields are inferred" in caplog.text

    def test_enabled_overrides_not_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="event_fields.processor"):
            build_processor(GeneratorConfig(override_annotation=OVERRIDE))
        assert "all fields are inferred" not in caplog.text
