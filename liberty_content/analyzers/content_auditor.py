"""
Composite content auditor.

Runs the five section analyzers over a piece of text, combines their scores
into a weighted overall score, and derives the compliance verdict, redesign
priority and bucketed recommendations. The audit is a pure function of its
input: no I/O, no state carried between calls.
"""
from __future__ import annotations

import logging
from typing import Optional

from ..config.lexicon import BrandLexicon, DEFAULT_LEXICON
from ..utils.helpers import round_half_up
from .audience_analyzer import analyze_audience_alignment
from .brand_voice_analyzer import analyze_brand_voice
from .compliance_analyzer import analyze_compliance
from .models import (
    AuditResult,
    ComplianceAnalysis,
    ComplianceStatus,
    Recommendations,
    RedesignPriority,
    SalesTacticsAnalysis,
    SectionAnalysis,
)
from .sales_tactics_analyzer import analyze_sales_tactics
from .structure_analyzer import analyze_content_structure

logger = logging.getLogger(__name__)

# Section weights (sum to 1.0)
SECTION_WEIGHTS = {
    "brand_voice": 0.30,
    "audience_alignment": 0.20,
    "content_structure": 0.15,
    "compliance": 0.25,
    "sales_tactics": 0.10,
}

RECOMMENDATION_THRESHOLD = 70


class ContentAuditor:
    """Audits text against the Liberty Gold Silver brand and compliance framework."""

    def __init__(self, lexicon: BrandLexicon = DEFAULT_LEXICON):
        self.lexicon = lexicon

    def audit(self, content: str, content_type: Optional[str] = None) -> AuditResult:
        text = content if isinstance(content, str) else ""

        brand_voice = analyze_brand_voice(text, self.lexicon)
        audience = analyze_audience_alignment(text, self.lexicon)
        structure = analyze_content_structure(text, self.lexicon)
        compliance = analyze_compliance(text, self.lexicon)
        sales = analyze_sales_tactics(text, self.lexicon)

        overall = self._overall_score(brand_voice, audience, structure, compliance, sales)

        result = AuditResult(
            overall_score=overall,
            compliance_status=ComplianceStatus.from_score(overall),
            brand_voice=brand_voice,
            audience_alignment=audience,
            content_structure=structure,
            compliance=compliance,
            sales_tactics=sales,
            recommendations=self._recommendations(brand_voice, audience, structure, compliance, sales),
            redesign_priority=RedesignPriority.from_audit(overall, compliance.disclaimers_present),
            content_type=content_type,
        )
        logger.debug(
            "Audit: overall=%d status=%s priority=%s chars=%d",
            overall, result.compliance_status.value, result.redesign_priority.value, len(text),
        )
        return result

    @staticmethod
    def _overall_score(
        brand_voice: SectionAnalysis,
        audience: SectionAnalysis,
        structure: SectionAnalysis,
        compliance: ComplianceAnalysis,
        sales: SalesTacticsAnalysis,
    ) -> int:
        weighted = (
            brand_voice.score * SECTION_WEIGHTS["brand_voice"]
            + audience.score * SECTION_WEIGHTS["audience_alignment"]
            + structure.score * SECTION_WEIGHTS["content_structure"]
            + compliance.score * SECTION_WEIGHTS["compliance"]
            + sales.score * SECTION_WEIGHTS["sales_tactics"]
        )
        return min(100, max(0, round_half_up(weighted)))

    @staticmethod
    def _recommendations(
        brand_voice: SectionAnalysis,
        audience: SectionAnalysis,
        structure: SectionAnalysis,
        compliance: ComplianceAnalysis,
        sales: SalesTacticsAnalysis,
    ) -> Recommendations:
        rec = Recommendations()

        def below(section: SectionAnalysis, name: str) -> bool:
            return section.value_of(name) < RECOMMENDATION_THRESHOLD

        # Brand voice
        if below(brand_voice, "knowledgeable_authoritative"):
            rec.voice_adjustments.append("Add more data, historical context, and authoritative sources")
        if below(brand_voice, "trustworthy_transparent"):
            rec.voice_adjustments.append("Include more transparency about risks and processes")
        if below(brand_voice, "professional_established"):
            rec.voice_adjustments.append("Replace casual or trendy wording with timeless, professional language")
        if below(brand_voice, "protective_strategic"):
            rec.voice_adjustments.append("Shift from sales-focused to protective, educational tone")

        # Audience
        if below(audience, "age_appropriate"):
            rec.voice_adjustments.append("Remove slang and address retirement-age readers directly")
        if below(audience, "tone_match"):
            rec.voice_adjustments.append("Emphasize stability, preservation, and careful consideration")
        if below(audience, "complexity_level"):
            rec.structural_changes.append("Aim for 15-25 words per sentence and limit technical jargon")

        # Compliance
        if not compliance.disclaimers_present:
            rec.compliance_additions.append("Add required financial disclaimers")
        if not compliance.risk_disclosures:
            rec.compliance_additions.append("Include risk disclosure statements")
        if not compliance.educational_framing:
            rec.compliance_additions.append("Reframe content as educational rather than promotional")

        # Structure
        if below(structure, "information_hierarchy"):
            rec.structural_changes.append("Improve content structure with headers and logical flow")
        if below(structure, "readability"):
            rec.structural_changes.append("Break up dense text with bullet points and shorter paragraphs")
        if below(structure, "educational_flow"):
            rec.structural_changes.append("Guide readers step by step and recap the key points")

        # Sales tactics
        if sales.pressure_tactics:
            rec.immediate_fixes.append("Remove pressure tactics and urgency language")
        if sales.aggressive_terms:
            rec.immediate_fixes.append("Replace aggressive return claims with balanced, evidence-based language")
        if sales.trust_vs_push_ratio < 1:
            rec.immediate_fixes.append("Increase educational content relative to sales messaging")

        return rec


_default_auditor = ContentAuditor()


def audit_content(content: str, content_type: Optional[str] = None) -> AuditResult:
    """Audit ``content`` with the default lexicon."""
    return _default_auditor.audit(content, content_type)
