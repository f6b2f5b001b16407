"""
Content analyzers package
"""

from .brand_compliance import BrandComplianceResult, validate_brand_compliance
from .content_auditor import ContentAuditor, audit_content
from .models import AuditResult, ComplianceStatus, DimensionScore, RedesignPriority

__all__ = [
    'AuditResult',
    'BrandComplianceResult',
    'ComplianceStatus',
    'ContentAuditor',
    'DimensionScore',
    'RedesignPriority',
    'audit_content',
    'validate_brand_compliance',
]
