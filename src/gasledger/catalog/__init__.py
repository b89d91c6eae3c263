"""Contract catalog: artifacts, selectors and bytecode matching."""

from .artifacts import ContractArtifact, MethodSignature, load_artifacts, parse_artifact
from .builder import Catalog, build_catalog
from .selectors import function_selector, method_id, selector_from_input

__all__ = [
    "Catalog",
    "ContractArtifact",
    "MethodSignature",
    "build_catalog",
    "function_selector",
    "load_artifacts",
    "method_id",
    "parse_artifact",
    "selector_from_input",
]
