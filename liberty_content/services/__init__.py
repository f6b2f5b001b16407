"""
Content services: generation, redesign, SEO metadata and the knowledge base
"""

from .content_generator import ContentGenerator, ContentOutput, ContentRequest
from .content_redesigner import ContentRedesigner, RedesignIntensity, RedesignOptions, RedesignResult
from .knowledge_manager import (
    KnowledgeBaseError,
    KnowledgeManager,
    KnowledgeSource,
    KnowledgeSourceExistsError,
    KnowledgeSourceNotFoundError,
)
from .seo_metadata import SeoMetadata, build_seo_metadata

__all__ = [
    'ContentGenerator',
    'ContentOutput',
    'ContentRedesigner',
    'ContentRequest',
    'KnowledgeBaseError',
    'KnowledgeManager',
    'KnowledgeSource',
    'KnowledgeSourceExistsError',
    'KnowledgeSourceNotFoundError',
    'RedesignIntensity',
    'RedesignOptions',
    'RedesignResult',
    'SeoMetadata',
    'build_seo_metadata',
]
