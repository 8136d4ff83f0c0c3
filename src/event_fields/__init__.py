"""
event-fields - Field model inference for event interfaces

Infers, for each event interface handed over by a front end, the ordered set
of named, typed fields implied by its getters and setters (or declared
explicitly through an override annotation). The resulting catalog feeds an
implementation code generator.
"""

__version__ = "0.1.0"

from .classifier import Classification, MethodKind, classify
from .config import GeneratorConfig, load_config
from .explicit import parse_explicit_fields
from .inference import FieldInferenceEngine
from .models import (
    AnnotationDef,
    EventCatalog,
    EventDescriptor,
    FieldMapping,
    InterfaceDef,
    MethodDef,
    ParameterDef,
    TypeRef,
)
from .processor import EventInterfaceProcessor, build_processor
from .registry import EventRegistry

__all__ = [
    "build_processor",  # Main entry point
    "EventInterfaceProcessor",
    "FieldInferenceEngine",
    "EventRegistry",
    "classify",
    "Classification",
    "MethodKind",
    "parse_explicit_fields",
    "GeneratorConfig",
    "load_config",
    "AnnotationDef",
    "EventCatalog",
    "EventDescriptor",
    "FieldMapping",
    "InterfaceDef",
    "MethodDef",
    "ParameterDef",
    "TypeRef",
]
