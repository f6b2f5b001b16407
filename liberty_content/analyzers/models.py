"""
Shared data models for the analyzer modules.

This module contains the core data structures used across all analyzers:
- ComplianceStatus: Tri-state verdict derived from the overall score
- RedesignPriority: How urgently a piece of content needs rework
- DimensionScore: One bounded sub-metric plus the negative markers it matched
- SectionAnalysis: A group of dimensions averaged into one section score
- ComplianceAnalysis / SalesTacticsAnalysis: Sections with their own shape
- Recommendations / AuditResult: The full output of a content audit
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class ComplianceStatus(Enum):
    """Overall audit verdict."""
    PASSED = "PASSED"
    NEEDS_IMPROVEMENT = "NEEDS_IMPROVEMENT"
    FAILED = "FAILED"

    @classmethod
    def from_score(cls, score: int) -> "ComplianceStatus":
        if score >= 80:
            return cls.PASSED
        if score >= 60:
            return cls.NEEDS_IMPROVEMENT
        return cls.FAILED


class RedesignPriority(Enum):
    """Urgency of a redesign, lowest to highest."""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"

    @classmethod
    def from_audit(cls, score: int, disclaimers_present: bool) -> "RedesignPriority":
        if score < 40:
            return cls.CRITICAL
        if score < 60:
            return cls.HIGH
        if score < 75 or not disclaimers_present:
            return cls.MEDIUM
        return cls.LOW


@dataclass
class DimensionScore:
    """
    A single bounded sub-metric.

    Attributes:
        value: Score clamped to [0, 100]
        matched_markers: Negative marker phrases found in the text, in lexicon order
    """
    value: int
    matched_markers: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"value": self.value, "matched_markers": list(self.matched_markers)}


@dataclass
class SectionAnalysis:
    """
    Equal-weighted group of dimensions (brand voice, audience alignment,
    content structure).
    """
    score: int
    dimensions: Dict[str, DimensionScore]
    issues: List[str] = field(default_factory=list)

    def value_of(self, dimension: str) -> int:
        return self.dimensions[dimension].value

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {"score": self.score}
        for name, dim in self.dimensions.items():
            d[name] = dim.value
        d["issues"] = list(self.issues)
        return d


@dataclass
class ComplianceAnalysis:
    score: int
    disclaimers_present: bool
    risk_disclosures: bool
    educational_framing: bool
    issues: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "disclaimers_present": self.disclaimers_present,
            "risk_disclosures": self.risk_disclosures,
            "educational_framing": self.educational_framing,
            "issues": list(self.issues),
        }


@dataclass
class SalesTacticsAnalysis:
    score: int
    pressure_tactics: List[str]
    urgency_language: List[str]
    aggressive_terms: List[str]
    trust_vs_push_ratio: float
    issues: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "pressure_tactics": list(self.pressure_tactics),
            "urgency_language": list(self.urgency_language),
            "aggressive_terms": list(self.aggressive_terms),
            "trust_vs_push_ratio": self.trust_vs_push_ratio,
            "issues": list(self.issues),
        }


@dataclass
class Recommendations:
    immediate_fixes: List[str] = field(default_factory=list)
    structural_changes: List[str] = field(default_factory=list)
    voice_adjustments: List[str] = field(default_factory=list)
    compliance_additions: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, List[str]]:
        return {
            "immediate_fixes": list(self.immediate_fixes),
            "structural_changes": list(self.structural_changes),
            "voice_adjustments": list(self.voice_adjustments),
            "compliance_additions": list(self.compliance_additions),
        }


@dataclass
class AuditResult:
    """
    Result of a full content audit. Derived purely from the input text.

    Attributes:
        overall_score: Weighted composite of the five section scores
        compliance_status: PASSED / NEEDS_IMPROVEMENT / FAILED
        brand_voice, audience_alignment, content_structure: Dimension groups
        compliance: Disclaimer / risk / educational-framing checks
        sales_tactics: Pressure, urgency and aggressive-term findings
        recommendations: Rule-based remediation, bucketed by kind
        redesign_priority: LOW / MEDIUM / HIGH / CRITICAL
        content_type: Caller-supplied content type, recorded as given
    """
    overall_score: int
    compliance_status: ComplianceStatus
    brand_voice: SectionAnalysis
    audience_alignment: SectionAnalysis
    content_structure: SectionAnalysis
    compliance: ComplianceAnalysis
    sales_tactics: SalesTacticsAnalysis
    recommendations: Recommendations
    redesign_priority: RedesignPriority
    content_type: Optional[str] = None

    @property
    def issues(self) -> List[str]:
        """All section issues, in section order."""
        return (
            list(self.brand_voice.issues)
            + list(self.audience_alignment.issues)
            + list(self.content_structure.issues)
            + list(self.compliance.issues)
            + list(self.sales_tactics.issues)
        )

    @property
    def dimension_scores(self) -> Dict[str, DimensionScore]:
        scores: Dict[str, DimensionScore] = {}
        for section in (self.brand_voice, self.audience_alignment, self.content_structure):
            scores.update(section.dimensions)
        return scores

    def section_scores(self) -> Dict[str, int]:
        return {
            "brand_voice": self.brand_voice.score,
            "audience_alignment": self.audience_alignment.score,
            "content_structure": self.content_structure.score,
            "compliance": self.compliance.score,
            "sales_tactics": self.sales_tactics.score,
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "overall_score": self.overall_score,
            "compliance_status": self.compliance_status.value,
            "content_type": self.content_type,
            "detailed_analysis": {
                "brand_voice": self.brand_voice.to_dict(),
                "audience_alignment": self.audience_alignment.to_dict(),
                "content_structure": self.content_structure.to_dict(),
                "compliance_requirements": self.compliance.to_dict(),
                "sales_tactics": self.sales_tactics.to_dict(),
            },
            "dimension_scores": {k: v.to_dict() for k, v in self.dimension_scores.items()},
            "issues": self.issues,
            "recommendations": self.recommendations.to_dict(),
            "redesign_priority": self.redesign_priority.value,
        }
