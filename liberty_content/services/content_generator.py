"""
Template-based content generator.

Three chained passes over a content-type template:
  1. framework: template with the topic filled in, plus persona and CTA sections
  2. engagement: conversational substitutions
  3. technical: whitespace polish and the required disclaimer

The topic is run through the brand-voice transformation before anything is
rendered, and the final copy is checked by the brand compliance validator.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..analyzers.brand_compliance import BrandComplianceResult, validate_brand_compliance
from ..config.personas import AUTO_DETECT, DEFAULT_PERSONA, PersonaGuidance, get_persona_guidance
from ..config.settings import settings
from ..config.templates import (
    CONTENT_STRUCTURES,
    EDUCATIONAL_CTAS,
    ContentType,
    LengthTarget,
    get_disclaimer,
    get_template,
)
from ..utils.rules import apply_rules
from .brand_voice import ENGAGEMENT_RULES, apply_brand_voice_transformation
from .seo_metadata import SeoMetadata, build_seo_metadata

logger = logging.getLogger(__name__)


@dataclass
class ContentRequest:
    topic: str
    content_type: str = ContentType.BLOG.value
    target_audience: str = DEFAULT_PERSONA
    length_target: str = LengthTarget.MEDIUM.value
    include_cta: bool = False


@dataclass
class ContentOutput:
    content: str
    seo_metadata: SeoMetadata
    compliance: BrandComplianceResult
    refinement_passes: Dict[str, str] = field(default_factory=dict)
    content_type: str = ContentType.BLOG.value
    content_structure: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "content": self.content,
            "content_type": self.content_type,
            "content_structure": self.content_structure,
            "seo_metadata": self.seo_metadata.to_dict(),
            "compliance_status": self.compliance.to_dict(),
            "refinement_passes": dict(self.refinement_passes),
        }


class ContentGenerator:
    def __init__(self, brand: Optional[str] = None):
        self.brand = brand or settings.brand_name

    def generate(self, request: ContentRequest) -> ContentOutput:
        content_type = ContentType.parse(request.content_type)
        topic = apply_brand_voice_transformation(request.topic)
        guidance = None
        if request.target_audience != AUTO_DETECT:
            guidance = get_persona_guidance(request.target_audience)

        framework = self.framework_pass(topic, content_type, request, guidance)
        engagement = self.engagement_pass(framework)
        final = self.technical_pass(engagement)

        compliance = validate_brand_compliance(final)
        logger.info(
            "Generated %s content (%d chars, compliance score %d)",
            content_type.value, len(final), compliance.score,
        )
        return ContentOutput(
            content=final,
            seo_metadata=build_seo_metadata(final, topic=request.topic, brand=self.brand),
            compliance=compliance,
            refinement_passes={
                "pass_1_framework": framework,
                "pass_2_engagement": engagement,
                "pass_3_technical": final,
            },
            content_type=content_type.value,
            content_structure=CONTENT_STRUCTURES[content_type],
        )

    def framework_pass(
        self,
        topic: str,
        content_type: ContentType,
        request: ContentRequest,
        guidance: Optional[PersonaGuidance],
    ) -> str:
        content = get_template(content_type.value).format(topic=topic, brand=self.brand)

        if guidance is not None and LengthTarget.parse(request.length_target) is LengthTarget.LONG:
            points = "\n".join(f"- {p}" for p in guidance.value_propositions)
            content += f"\n\n## What This Means for {guidance.persona}\n\n{guidance.messaging_focus}.\n\n{points}"

        if request.include_cta:
            ctas = "\n".join(f"- {cta}" for cta in EDUCATIONAL_CTAS)
            content += f"\n\n## Continue Your Education\n\n{ctas}"

        return content

    @staticmethod
    def engagement_pass(content: str) -> str:
        return apply_rules(content, ENGAGEMENT_RULES)

    def technical_pass(self, content: str) -> str:
        polished = "\n".join(line.rstrip() for line in content.split("\n"))
        polished = re.sub(r"\n{3,}", "\n\n", polished).strip()
        return f"{polished}\n\n{get_disclaimer(polished, self.brand)}"


def generate_content(request: ContentRequest) -> ContentOutput:
    return ContentGenerator().generate(request)
