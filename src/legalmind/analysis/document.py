"""
Document analysis built on keyword rules and pattern extraction.

Produces a structured report for a contract: document type, parties, key
dates, financial terms, obligations, risks, compliance gaps, improvement
suggestions and quality scores. Classification and risk detection are
keyword checks over the lowercased text; parties, dates and amounts come
from PatternExtractor. Quality scores are drawn from fixed ranges and are
not derived from the text.
"""

import logging
import random
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Callable, List, Optional, Tuple, TypeVar

from legalmind.analysis.extractor import PatternExtractor
from legalmind.config.constants import (
    CLARITY_SCORE_RANGE,
    COMPLETENESS_SCORE_RANGE,
    COMPLIANCE_SCORE_RANGE,
    RISK_SCORE_RANGE,
)
from legalmind.protocols.collaborators import DocumentTextProvider, EventSink, emit_event

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class DocumentType:
    category: str
    subcategory: str
    confidence: float
    jurisdiction: str


@dataclass
class Party:
    name: str
    role: str
    type: str = "corporation"
    address: str = "Address extracted from document analysis"


@dataclass
class KeyDate:
    date: str
    normalized: Optional[str]
    description: str
    type: str  # "effective" | "deadline"
    importance: str  # "critical" | "high"


@dataclass
class FinancialTerm:
    amount: str
    currency: str
    type: str  # "fee" | "penalty"
    conditions: str
    frequency: str = "Annual"


@dataclass
class Obligation:
    party: str
    obligation: str
    deadline: str
    penalty: str
    status: str = "pending"


@dataclass
class RiskFactor:
    type: str  # "high" | "medium" | "low"
    description: str
    impact: str
    mitigation: str


@dataclass
class ComplianceItem:
    requirement: str
    status: str
    details: str


@dataclass
class Improvement:
    category: str
    priority: str
    issue: str
    suggestion: str
    impact: str
    example: str


@dataclass
class OverallScore:
    clarity: int
    completeness: int
    risk_level: int
    compliance: int


@dataclass
class DocumentAnalysis:
    """Full analysis report for one document."""

    document_type: DocumentType
    parties: List[Party]
    key_dates: List[KeyDate]
    financial_terms: List[FinancialTerm]
    obligations: List[Obligation]
    risk_factors: List[RiskFactor]
    compliance_items: List[ComplianceItem]
    improvements: List[Improvement]
    overall_score: OverallScore
    extracted_text: str
    processed_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class DocumentSummary:
    """Executive summary and key points derived from an analysis."""

    executive_summary: str
    key_points: List[str]
    analysis: DocumentAnalysis

    def to_dict(self) -> dict:
        return {
            "executive_summary": self.executive_summary,
            "key_points": list(self.key_points),
            "analysis": self.analysis.to_dict(),
        }


# (keywords, DocumentType) checked in order; first hit wins.
DOCUMENT_TYPE_RULES: List[Tuple[Tuple[str, ...], DocumentType]] = [
    (
        ("license", "software"),
        DocumentType("Software License Agreement", "Enterprise SaaS License", 94.2, "State of Delaware, USA"),
    ),
    (
        ("employment", "employee"),
        DocumentType("Employment Agreement", "Executive Employment Contract", 89.5, "United States"),
    ),
    (
        ("nda", "confidential"),
        DocumentType("Non-Disclosure Agreement", "Mutual NDA", 92.1, "United States"),
    ),
]

DEFAULT_DOCUMENT_TYPE = DocumentType("Contract", "Service Agreement", 85.0, "United States")

STANDARD_IMPROVEMENTS = (
    Improvement(
        category="Language Clarity",
        priority="high",
        issue="Ambiguous termination clause language",
        suggestion="Replace vague terms with specific timeframes and procedures",
        impact="Reduces potential disputes and provides clear expectations",
        example="Change 'reasonable notice' to 'thirty (30) calendar days written notice'",
    ),
    Improvement(
        category="Legal Compliance",
        priority="critical",
        issue="Missing data protection clauses",
        suggestion="Add comprehensive GDPR compliance provisions",
        impact="Ensures regulatory compliance and avoids potential fines",
        example="Include data processing, subject rights, and breach notification procedures",
    ),
    Improvement(
        category="Risk Mitigation",
        priority="high",
        issue="Liability exposure needs limitation",
        suggestion="Implement liability caps and carve-outs",
        impact="Limits financial exposure while maintaining accountability",
        example="Cap total liability at 12 months of fees paid, except for IP violations",
    ),
)


class DocumentAnalyzer:
    """
    Rule-based contract analyzer.

    Attributes:
        _extractor: PatternExtractor for parties, dates and amounts
        _rng: Random source for the quality scores
        _event_sink: Optional collaborator notified of each analysis

    Example:
        >>> analyzer = DocumentAnalyzer(PatternExtractor(), rng=random.Random(0))
        >>> report = analyzer.analyze(SAMPLE_LICENSE_AGREEMENT)
        >>> report.document_type.category
        'Software License Agreement'
    """

    def __init__(
        self,
        extractor: PatternExtractor,
        rng: Optional[random.Random] = None,
        event_sink: Optional[EventSink] = None,
    ):
        self._extractor = extractor
        self._rng = rng if rng is not None else random.Random()
        self._event_sink = event_sink

    def analyze(self, text: str) -> DocumentAnalysis:
        """
        Analyze document text.

        Args:
            text: Plain document text

        Returns:
            DocumentAnalysis report. Sections that fail internally are
            logged and left empty.

        Raises:
            TypeError: If text is not a string
        """
        if not isinstance(text, str):
            raise TypeError(f"Expected document text as str, got {type(text).__name__}")

        lowered = text.lower()
        parties = self._section("parties", lambda: self._parties(text), [])
        analysis = DocumentAnalysis(
            document_type=self.classify(lowered),
            parties=parties,
            key_dates=self._section("key_dates", lambda: self._key_dates(text), []),
            financial_terms=self._section("financial_terms", lambda: self._financial_terms(text), []),
            obligations=self._obligations(parties),
            risk_factors=self._section("risk_factors", lambda: self.detect_risks(lowered), []),
            compliance_items=self._section("compliance", lambda: self.check_compliance(lowered), []),
            improvements=list(STANDARD_IMPROVEMENTS),
            overall_score=self._scores(),
            extracted_text=text,
        )

        logger.info(
            f"Analyzed document: {analysis.document_type.category}, "
            f"{len(analysis.parties)} parties, {len(analysis.key_dates)} dates, "
            f"{len(analysis.financial_terms)} amounts"
        )
        emit_event(
            self._event_sink,
            "document.analyzed",
            category=analysis.document_type.category,
            length=len(text),
        )
        return analysis

    def analyze_provider(self, provider: DocumentTextProvider) -> DocumentAnalysis:
        """Analyze the text supplied by a document-text provider."""
        return self.analyze(provider.get_document_text())

    def summarize(self, text: str) -> DocumentSummary:
        """Analyze text and condense the report into a summary."""
        analysis = self.analyze(text)
        party_names = ", ".join(p.name for p in analysis.parties) or "none identified"
        executive_summary = (
            f"This document analysis reveals a {analysis.document_type.category} with "
            f"{analysis.overall_score.clarity}% clarity score. Key parties include "
            f"{party_names}. The document contains {len(analysis.risk_factors)} identified "
            f"risk factors and {len(analysis.improvements)} improvement opportunities."
        )
        key_points = [
            f"Document Type: {analysis.document_type.category}",
            f"Parties: {len(analysis.parties)} entities identified",
            f"Financial Terms: {len(analysis.financial_terms)} monetary provisions",
            f"Risk Level: {analysis.overall_score.risk_level}% risk assessment",
            f"Compliance Score: {analysis.overall_score.compliance}%",
        ]
        return DocumentSummary(executive_summary, key_points, analysis)

    # ------------------------------------------------------------------
    # Rules
    # ------------------------------------------------------------------

    @staticmethod
    def classify(lowered: str) -> DocumentType:
        """Document type from the first keyword rule that fires."""
        for keywords, doc_type in DOCUMENT_TYPE_RULES:
            if any(k in lowered for k in keywords):
                return DocumentType(**asdict(doc_type))
        return DocumentType(**asdict(DEFAULT_DOCUMENT_TYPE))

    @staticmethod
    def detect_risks(lowered: str) -> List[RiskFactor]:
        risks = []
        if "unlimited liability" in lowered or "uncapped liability" in lowered:
            risks.append(
                RiskFactor(
                    type="high",
                    description="Unlimited liability exposure identified",
                    impact="Potential for significant financial risk",
                    mitigation="Negotiate liability caps and limitations",
                )
            )
        if "automatic renewal" in lowered and "opt-out" not in lowered:
            risks.append(
                RiskFactor(
                    type="medium",
                    description="Automatic renewal without clear opt-out mechanism",
                    impact="May result in unintended contract extensions",
                    mitigation="Add clear termination and opt-out procedures",
                )
            )
        return risks

    @staticmethod
    def check_compliance(lowered: str) -> List[ComplianceItem]:
        items = []
        if "gdpr" not in lowered and "data protection" not in lowered:
            items.append(
                ComplianceItem(
                    requirement="GDPR Data Protection",
                    status="non-compliant",
                    details="No GDPR or data protection clauses identified",
                )
            )
        if "force majeure" not in lowered:
            items.append(
                ComplianceItem(
                    requirement="Force Majeure Clause",
                    status="non-compliant",
                    details="No force majeure provisions found",
                )
            )
        return items

    def _parties(self, text: str) -> List[Party]:
        return [
            Party(name=f.normalized, role=f.role)
            for f in self._extractor.extract_party_names(text)
        ]

    def _key_dates(self, text: str) -> List[KeyDate]:
        dates = []
        for i, f in enumerate(self._extractor.extract_dates(text)):
            first = i == 0
            dates.append(
                KeyDate(
                    date=f.raw_match,
                    normalized=f.normalized,
                    description=f"Important date {i + 1} identified in document",
                    type="effective" if first else "deadline",
                    importance="critical" if first else "high",
                )
            )
        return dates

    def _financial_terms(self, text: str) -> List[FinancialTerm]:
        return [
            FinancialTerm(
                amount=f.normalized,
                currency=f.currency,
                type="fee" if i == 0 else "penalty",
                conditions=f"Payment term {i + 1} as specified in document",
            )
            for i, f in enumerate(self._extractor.extract_amounts(text))
        ]

    @staticmethod
    def _obligations(parties: List[Party]) -> List[Obligation]:
        return [
            Obligation(
                party=parties[0].name if parties else "Primary Party",
                obligation="Maintain service level agreements and uptime requirements",
                deadline="Ongoing",
                penalty="Service credits as specified",
            )
        ]

    def _scores(self) -> OverallScore:
        return OverallScore(
            clarity=self._rng.randint(*CLARITY_SCORE_RANGE),
            completeness=self._rng.randint(*COMPLETENESS_SCORE_RANGE),
            risk_level=self._rng.randint(*RISK_SCORE_RANGE),
            compliance=self._rng.randint(*COMPLIANCE_SCORE_RANGE),
        )

    @staticmethod
    def _section(name: str, build: Callable[[], T], default: T) -> T:
        try:
            return build()
        except Exception as e:
            logger.warning(f"Analysis section {name!r} failed: {e}")
            return default
