"""
Content redesign: audit, rewrite, re-audit.

Three intensities:
  light     fix aggressive terms and pressure tactics, add a missing disclaimer
  moderate  structure, brand voice, audience and compliance passes over the text
  complete  regenerate from a template and carry over the extracted key information

Unknown intensities behave as moderate. Nothing in here raises for odd input.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from ..analyzers.content_auditor import ContentAuditor
from ..analyzers.models import AuditResult, ComplianceStatus
from ..config.personas import DEFAULT_PERSONA, get_persona_language_rules
from ..config.settings import settings
from ..config.templates import (
    EDUCATIONAL_PREFIX,
    RISK_STATEMENT,
    SEO_CONTENT_TYPES,
    TRUST_STATEMENT,
    ContentType,
    LengthTarget,
    get_disclaimer,
)
from ..utils.helpers import normalize_whitespace, split_paragraphs, split_words
from ..utils.rules import RewriteRule, apply_rules, literal_rule
from .brand_voice import (
    AUTHORITATIVE_RULES,
    PLAIN_LANGUAGE_RULES,
    PROTECTIVE_RULES,
    SLANG_RULES,
    aggressive_term_replacement,
    apply_brand_voice_rules,
)
from .content_generator import ContentGenerator, ContentRequest
from .key_information import KeyInformation, derive_title, derive_topic, extract_key_information
from .seo_metadata import build_seo_metadata

logger = logging.getLogger(__name__)

VOICE_FIX_THRESHOLD = 70

MODERATE_STATISTICS = 3
MAX_WOVEN_FACTS = 2

# Paragraph-count thresholds for generated section headings.
SECTION_HEADINGS = (
    (0, "Introduction"),
    (2, "Key Benefits"),
    (4, "Important Considerations"),
    (6, "Next Steps"),
)

SENTENCE_BREAK = re.compile(r"([.!?])[ \t]+([A-Z])")
LIST_LEAD_IN = re.compile(
    r"([^.\n]+)(benefits|advantages|factors|considerations|reasons)([^.\n]*:)[ \t]*"
    r"([^.\n]+,[ \t]*[^.\n]+,[ \t]*[^.\n]+)",
    re.IGNORECASE,
)


class RedesignIntensity(Enum):
    LIGHT = "light"
    MODERATE = "moderate"
    COMPLETE = "complete"

    @classmethod
    def parse(cls, value: Optional[str]) -> "RedesignIntensity":
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.MODERATE


@dataclass
class RedesignOptions:
    content_type: Optional[str] = None
    target_audience: Optional[str] = None
    preserve_key_information: bool = True
    redesign_intensity: str = RedesignIntensity.MODERATE.value
    specific_requirements: List[str] = field(default_factory=list)


@dataclass
class RedesignResult:
    redesigned_content: str
    original_audit: AuditResult
    redesigned_audit: AuditResult
    changes_made: List[str]
    improvements: List[str]
    preserved_elements: List[str]
    intensity: RedesignIntensity
    preserved_information: Optional[KeyInformation] = None
    specific_requirements: List[str] = field(default_factory=list)
    seo_metadata: Optional[Dict[str, Any]] = None

    @property
    def final_compliance_status(self) -> ComplianceStatus:
        return self.redesigned_audit.compliance_status

    @property
    def improvement_metrics(self) -> Dict[str, int]:
        before = self.original_audit.section_scores()
        after = self.redesigned_audit.section_scores()
        metrics = {"overall": self.redesigned_audit.overall_score - self.original_audit.overall_score}
        metrics.update({name: after[name] - before[name] for name in before})
        return metrics

    def to_dict(self) -> Dict[str, Any]:
        out = {
            "redesigned_content": self.redesigned_content,
            "transformation_summary": {
                "changes_made": list(self.changes_made),
                "improvements": list(self.improvements),
                "preserved_elements": list(self.preserved_elements),
            },
            "before_after_comparison": {
                "original_audit": self.original_audit.to_dict(),
                "redesigned_audit": self.redesigned_audit.to_dict(),
                "improvement_metrics": self.improvement_metrics,
            },
            "final_compliance_status": self.final_compliance_status.value,
            "preserved_information": self.preserved_information.to_dict() if self.preserved_information else None,
            "specific_requirements": list(self.specific_requirements),
            "redesign_intensity": self.intensity.value,
        }
        if self.seo_metadata is not None:
            out["seo_metadata"] = self.seo_metadata
        return out


# Structural helpers
def section_headings(paragraph_count: int) -> List[str]:
    return [name for threshold, name in SECTION_HEADINGS if paragraph_count > threshold]


def add_section_headers(content: str, sections: List[str]) -> str:
    """Put ``sections[i - 1]`` in front of block ``i`` (block 0 is the title)."""
    blocks: List[str] = []
    for i, block in enumerate(content.split("\n\n")):
        if 0 < i <= len(sections):
            blocks.append(f"## {sections[i - 1]}")
        blocks.append(block)
    return "\n\n".join(blocks)


def break_up_sentences(content: str) -> str:
    return SENTENCE_BREAK.sub(r"\1\n\n\2", content)


def _bullets(match: "re.Match[str]") -> str:
    items = [re.sub(r"^(and|or)\s+", "", item.strip(), flags=re.IGNORECASE)
             for item in match.group(4).split(",")]
    lines = "\n".join(f"- {item}" for item in items if item)
    return f"{match.group(1)}{match.group(2)}{match.group(3)}\n{lines}"


def convert_to_lists(content: str) -> str:
    """Turn "... benefits include: a, b, c" into a bulleted list."""
    return LIST_LEAD_IN.sub(_bullets, content)


def insert_statistic(content: str, statistic: str) -> str:
    sentences = content.split(".")
    if len(sentences) > 2:
        sentences.insert(2, f" {statistic}")
        return ".".join(sentences)
    return f"{content} {statistic}"


def insert_fact(content: str, fact: str) -> str:
    paragraphs = content.split("\n\n")
    if len(paragraphs) > 1:
        paragraphs.insert(1, fact)
        return "\n\n".join(paragraphs)
    return f"{content}\n\n{fact}"


def weave_in_key_information(content: str, key_info: KeyInformation, max_statistics: Optional[int]) -> str:
    """Re-insert statistics and facts missing from ``content`` (verbatim check)."""
    statistics = key_info.statistics if max_statistics is None else key_info.statistics[:max_statistics]
    for stat in statistics:
        if stat not in content:
            content = insert_statistic(content, stat)
    for fact in key_info.facts[:MAX_WOVEN_FACTS]:
        if fact not in content:
            content = insert_fact(content, fact)
    return content


def wants_seo_metadata(content_type: Optional[str]) -> bool:
    """Only an explicitly requested web content type gets SEO metadata."""
    requested = (content_type or "").strip().lower()
    return any(requested == t.value for t in SEO_CONTENT_TYPES)


def length_for(content: str) -> LengthTarget:
    words = len(split_words(content))
    if words < 300:
        return LengthTarget.SHORT
    if words < 800:
        return LengthTarget.MEDIUM
    return LengthTarget.LONG


class ContentRedesigner:
    def __init__(self, auditor: Optional[ContentAuditor] = None, generator: Optional[ContentGenerator] = None,
                 brand: Optional[str] = None):
        self.brand = brand or settings.brand_name
        self.auditor = auditor or ContentAuditor()
        self.generator = generator or ContentGenerator(brand=self.brand)

    def redesign(self, original: str, options: Optional[RedesignOptions] = None) -> RedesignResult:
        options = options or RedesignOptions()
        original = original if isinstance(original, str) else ""
        intensity = RedesignIntensity.parse(options.redesign_intensity)

        before = self.auditor.audit(original, options.content_type)
        key_info = extract_key_information(original) if options.preserve_key_information else None

        if intensity is RedesignIntensity.LIGHT:
            redesigned = self.light(original, before)
        elif intensity is RedesignIntensity.COMPLETE:
            redesigned = self.complete(original, options, key_info)
        else:
            redesigned = self.moderate(original, before, options, key_info)

        after = self.auditor.audit(redesigned, options.content_type)
        logger.info(
            "Redesign (%s): overall %d -> %d, status %s",
            intensity.value, before.overall_score, after.overall_score, after.compliance_status.value,
        )

        seo = None
        if wants_seo_metadata(options.content_type):
            seo = build_seo_metadata(redesigned, topic=derive_topic(original), brand=self.brand).to_dict()

        return RedesignResult(
            redesigned_content=redesigned,
            original_audit=before,
            redesigned_audit=after,
            changes_made=self._changes_made(original, redesigned, before, after, intensity),
            improvements=self._improvements(before, after),
            preserved_elements=self._preserved_elements(key_info),
            intensity=intensity,
            preserved_information=key_info,
            specific_requirements=list(options.specific_requirements or []),
            seo_metadata=seo,
        )

    # Intensities
    def light(self, content: str, audit: AuditResult) -> str:
        sales = audit.sales_tactics
        rules: List[RewriteRule] = [
            literal_rule(term, aggressive_term_replacement(term)) for term in sales.aggressive_terms
        ]
        rules.extend(literal_rule(tactic, "") for tactic in sales.pressure_tactics)
        content = apply_rules(content, rules)

        if not audit.compliance.disclaimers_present:
            content = f"{content}\n\n{get_disclaimer(content, self.brand)}"
        return normalize_whitespace(content)

    def moderate(self, content: str, audit: AuditResult, options: RedesignOptions,
                 key_info: Optional[KeyInformation]) -> str:
        content = self.improve_structure(content)
        content = self.transform_voice(content, audit)
        content = self.align_audience(content, options.target_audience)
        content = self.ensure_compliance(content, audit)
        if key_info is not None:
            content = weave_in_key_information(content, key_info, MODERATE_STATISTICS)
        return content.strip()

    def complete(self, content: str, options: RedesignOptions, key_info: Optional[KeyInformation]) -> str:
        lowered = content.lower()
        request = ContentRequest(
            topic=derive_topic(content),
            content_type=options.content_type or ContentType.BLOG.value,
            target_audience=options.target_audience or DEFAULT_PERSONA,
            length_target=length_for(content).value,
            include_cta="call" in lowered or "contact" in lowered,
        )
        regenerated = self.generator.generate(request).content
        if key_info is not None:
            regenerated = weave_in_key_information(regenerated, key_info, None)
        return regenerated

    # Moderate passes
    @staticmethod
    def improve_structure(content: str) -> str:
        paragraphs = split_paragraphs(content)
        if len(paragraphs) > 3 and "#" not in content:
            content = f"# {derive_title(content)}\n\n{content}"
            if len(paragraphs) > 5:
                content = add_section_headers(content, section_headings(len(paragraphs)))
        content = break_up_sentences(content)
        return convert_to_lists(content)

    @staticmethod
    def transform_voice(content: str, audit: AuditResult) -> str:
        voice = audit.brand_voice
        content = apply_brand_voice_rules(content)
        if voice.value_of("knowledgeable_authoritative") < VOICE_FIX_THRESHOLD:
            content = apply_rules(content, AUTHORITATIVE_RULES)
        if voice.value_of("trustworthy_transparent") < VOICE_FIX_THRESHOLD and "risk" not in content.lower():
            content = f"{content} {TRUST_STATEMENT}"
        if voice.value_of("protective_strategic") < VOICE_FIX_THRESHOLD:
            content = apply_rules(content, PROTECTIVE_RULES)
        return content

    @staticmethod
    def align_audience(content: str, persona: Optional[str]) -> str:
        content = apply_rules(content, get_persona_language_rules(persona))
        content = apply_rules(content, PLAIN_LANGUAGE_RULES)
        content = apply_rules(content, SLANG_RULES)
        return re.sub(r"[ \t]{2,}", " ", content)

    def ensure_compliance(self, content: str, audit: AuditResult) -> str:
        compliance = audit.compliance
        if not compliance.disclaimers_present:
            content = f"{content}\n\n{get_disclaimer(content, self.brand)}"
        if not compliance.risk_disclosures and "risk" not in content.lower():
            content = f"{content} {RISK_STATEMENT}"
        if not compliance.educational_framing:
            lowered = content.lower()
            if "understand" not in lowered and "education" not in lowered:
                content = self._prefix_body(content, EDUCATIONAL_PREFIX)
        return content

    @staticmethod
    def _prefix_body(content: str, prefix: str) -> str:
        # Keep a leading title heading first.
        if content.startswith("#") and "\n\n" in content:
            title, body = content.split("\n\n", 1)
            return f"{title}\n\n{prefix} {body}"
        return f"{prefix} {content}"

    # Summary
    @staticmethod
    def _changes_made(original: str, redesigned: str, before: AuditResult, after: AuditResult,
                      intensity: RedesignIntensity) -> List[str]:
        changes: List[str] = []
        if intensity is RedesignIntensity.COMPLETE:
            changes.append("Regenerated content from the educational template")
        if "#" in redesigned and "#" not in original:
            changes.append("Added structured headers and sections")
        if after.compliance.disclaimers_present and not before.compliance.disclaimers_present:
            changes.append("Added required financial disclaimers")
        if len(after.sales_tactics.aggressive_terms) < len(before.sales_tactics.aggressive_terms):
            changes.append("Removed aggressive sales language")
        if len(after.sales_tactics.pressure_tactics) < len(before.sales_tactics.pressure_tactics):
            changes.append("Removed pressure tactics")
        return changes

    def _improvements(self, before: AuditResult, after: AuditResult) -> List[str]:
        improvements: List[str] = []
        delta = after.brand_voice.score - before.brand_voice.score
        if delta > 0:
            improvements.append(f"Improved brand voice compliance by {delta} points")
        delta = after.compliance.score - before.compliance.score
        if delta > 0:
            improvements.append(f"Improved compliance requirements score by {delta} points")
        if before.compliance_status is ComplianceStatus.FAILED and after.compliance_status is not ComplianceStatus.FAILED:
            improvements.append(f"Achieved compliance with {self.brand} framework")
        return improvements

    @staticmethod
    def _preserved_elements(key_info: Optional[KeyInformation]) -> List[str]:
        if key_info is None:
            return []
        elements: List[str] = []
        if key_info.facts or key_info.company_specific:
            elements.append("Core educational message and key facts")
        if key_info.statistics:
            elements.append("Specific data points and statistics")
        if key_info.key_concepts:
            elements.append("Key concepts: " + ", ".join(key_info.key_concepts))
        return elements


def redesign_content(original: str, options: Optional[RedesignOptions] = None) -> RedesignResult:
    return ContentRedesigner().redesign(original, options)
