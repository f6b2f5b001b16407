"""
Liberty Gold Silver content server: brand-compliance auditing, rule-based
redesign and template content generation, exposed as MCP tools.
"""

__version__ = "1.0.0"
