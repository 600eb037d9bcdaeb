"""chunk-rules - NP chunking rules from leveled treebank annotations."""

from __future__ import annotations

from chunk_rules.api import create_corpus, extract_rules, generate_rules
from chunk_rules.config import ExtractionConfig
from chunk_rules.errors import (
    MalformedLevelError,
    RuleExtractionError,
    UnresolvableAncestorError,
)
from chunk_rules.extractor import RuleExtractor
from chunk_rules.result import ExtractionResult

__version__: str = "0.1.0"
__all__: list[str] = [
    "ExtractionConfig",
    "ExtractionResult",
    "MalformedLevelError",
    "RuleExtractionError",
    "RuleExtractor",
    "UnresolvableAncestorError",
    "create_corpus",
    "extract_rules",
    "generate_rules",
]
