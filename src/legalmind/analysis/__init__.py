"""Document analysis: pattern extraction and rule-based contract review."""

from legalmind.analysis.extractor import (
    ExtractedField,
    FieldKind,
    PatternExtractor,
    assign_party_roles,
)
from legalmind.analysis.document import (
    DocumentAnalysis,
    DocumentAnalyzer,
    DocumentSummary,
    DocumentType,
)
from legalmind.analysis.samples import SAMPLE_LICENSE_AGREEMENT

__all__ = [
    "PatternExtractor",
    "ExtractedField",
    "FieldKind",
    "assign_party_roles",
    "DocumentAnalyzer",
    "DocumentAnalysis",
    "DocumentSummary",
    "DocumentType",
    "SAMPLE_LICENSE_AGREEMENT",
]
