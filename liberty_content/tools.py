"""
Tool layer: argument models, tool definitions and dispatch.

Each tool has one pydantic argument model. A call is parsed into a tagged
union keyed on the tool name and routed by ``ToolRouter.dispatch``.
``ToolRouter.handle`` is the error boundary used by the MCP server: it always
returns text, either the JSON result or ``Error executing <tool>: <message>``.
"""
from __future__ import annotations

import json
import logging
import threading
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from .analyzers.brand_compliance import validate_brand_compliance
from .analyzers.content_auditor import ContentAuditor
from .config.personas import AUTO_DETECT, PERSONAS, get_persona_guidance
from .config.settings import settings
from .config.templates import CONTENT_STRUCTURES, ContentType, LengthTarget
from .services.content_generator import ContentGenerator, ContentRequest
from .services.content_redesigner import ContentRedesigner, RedesignIntensity, RedesignOptions
from .services.key_information import derive_topic
from .services.knowledge_manager import ALL_TYPES, SOURCE_TYPES, KnowledgeManager
from .services.seo_metadata import build_seo_metadata

logger = logging.getLogger(__name__)


class UnknownToolError(ValueError):
    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class ToolArgs(BaseModel):
    model_config = ConfigDict(extra="ignore")


# Argument models
class AuditContentArgs(ToolArgs):
    content: str
    content_type: Optional[str] = None


class RedesignContentArgs(ToolArgs):
    original_content: str
    content_type: Optional[str] = None
    target_audience: Optional[str] = None
    preserve_key_information: bool = True
    redesign_intensity: Optional[str] = None
    specific_requirements: Optional[List[str]] = None


class ValidateBrandComplianceArgs(ToolArgs):
    content: str
    content_type: Optional[str] = None
    check_disclaimers: bool = True


class GetPersonaGuidanceArgs(ToolArgs):
    persona: Optional[str] = None
    content_type: Optional[str] = None


class CreateLibertyContentArgs(ToolArgs):
    content_type: str
    topic: str
    target_audience: Optional[str] = None
    length_target: Optional[str] = None
    include_cta: bool = True


class GenerateSeoMetadataArgs(ToolArgs):
    content: str
    content_type: str = ContentType.BLOG.value
    primary_keyword: Optional[str] = None


class SearchKnowledgeBaseArgs(ToolArgs):
    query: str
    source_types: Optional[List[str]] = None
    max_results: int = 10


class AddKnowledgeSourceArgs(ToolArgs):
    url: str
    source_type: str
    description: Optional[str] = None
    tags: Optional[List[str]] = None


class ListKnowledgeSourcesArgs(ToolArgs):
    filter_by_type: Optional[str] = None
    search_term: Optional[str] = None


# Tagged calls
class AuditContentCall(BaseModel):
    name: Literal["audit_content"]
    arguments: AuditContentArgs


class RedesignContentCall(BaseModel):
    name: Literal["redesign_content"]
    arguments: RedesignContentArgs


class ValidateBrandComplianceCall(BaseModel):
    name: Literal["validate_brand_compliance"]
    arguments: ValidateBrandComplianceArgs


class GetPersonaGuidanceCall(BaseModel):
    name: Literal["get_persona_guidance"]
    arguments: GetPersonaGuidanceArgs


class CreateLibertyContentCall(BaseModel):
    name: Literal["create_liberty_content"]
    arguments: CreateLibertyContentArgs


class GenerateSeoMetadataCall(BaseModel):
    name: Literal["generate_seo_metadata"]
    arguments: GenerateSeoMetadataArgs


class SearchKnowledgeBaseCall(BaseModel):
    name: Literal["search_knowledge_base"]
    arguments: SearchKnowledgeBaseArgs


class AddKnowledgeSourceCall(BaseModel):
    name: Literal["add_knowledge_source"]
    arguments: AddKnowledgeSourceArgs


class ListKnowledgeSourcesCall(BaseModel):
    name: Literal["list_knowledge_sources"]
    arguments: ListKnowledgeSourcesArgs


ToolCall = Annotated[
    Union[
        AuditContentCall,
        RedesignContentCall,
        ValidateBrandComplianceCall,
        GetPersonaGuidanceCall,
        CreateLibertyContentCall,
        GenerateSeoMetadataCall,
        SearchKnowledgeBaseCall,
        AddKnowledgeSourceCall,
        ListKnowledgeSourcesCall,
    ],
    Field(discriminator="name"),
]

_tool_call_adapter = TypeAdapter(ToolCall)

CONTENT_TYPE_VALUES = [t.value for t in ContentType]
PERSONA_VALUES = list(PERSONAS)


TOOL_DEFINITIONS: List[Dict[str, Any]] = [
    {
        "name": "create_liberty_content",
        "description": f"Generate content following the {settings.brand_name} Trust Through Education framework",
        "inputSchema": {
            "type": "object",
            "properties": {
                "content_type": {"type": "string", "enum": CONTENT_TYPE_VALUES,
                                 "description": "Type of content to generate"},
                "topic": {"type": "string", "description": "Main topic or subject for the content"},
                "target_audience": {"type": "string", "enum": PERSONA_VALUES + [AUTO_DETECT],
                                    "description": "Target audience persona", "default": AUTO_DETECT},
                "length_target": {"type": "string", "enum": [t.value for t in LengthTarget],
                                  "description": "Desired content length", "default": "medium"},
                "include_cta": {"type": "boolean", "description": "Include call-to-action elements",
                                "default": True},
            },
            "required": ["content_type", "topic"],
        },
    },
    {
        "name": "search_knowledge_base",
        "description": f"Search the {settings.brand_name} knowledge base for relevant information",
        "inputSchema": {
            "type": "object",
            "properties": {
                "query": {"type": "string", "description": "Search query for knowledge base"},
                "source_types": {
                    "type": "array",
                    "items": {"type": "string", "enum": list(SOURCE_TYPES) + [ALL_TYPES]},
                    "description": "Filter by source types",
                },
                "max_results": {"type": "number", "description": "Maximum number of results to return",
                                "default": 10},
            },
            "required": ["query"],
        },
    },
    {
        "name": "generate_seo_metadata",
        "description": "Generate SEO metadata for content",
        "inputSchema": {
            "type": "object",
            "properties": {
                "content": {"type": "string", "description": "Content to generate metadata for"},
                "content_type": {"type": "string", "enum": ["webpage", "landing_page", "blog"],
                                 "description": "Type of content for SEO optimization"},
                "primary_keyword": {"type": "string", "description": "Primary keyword to optimize for"},
            },
            "required": ["content", "content_type"],
        },
    },
    {
        "name": "validate_brand_compliance",
        "description": f"Validate content against {settings.brand_name} brand guidelines",
        "inputSchema": {
            "type": "object",
            "properties": {
                "content": {"type": "string", "description": "Content to validate"},
                "content_type": {"type": "string", "description": "Type of content being validated"},
                "check_disclaimers": {"type": "boolean", "description": "Whether to check for required disclaimers",
                                      "default": True},
            },
            "required": ["content", "content_type"],
        },
    },
    {
        "name": "get_persona_guidance",
        "description": "Get targeting guidance for specific customer personas",
        "inputSchema": {
            "type": "object",
            "properties": {
                "persona": {"type": "string", "enum": PERSONA_VALUES,
                            "description": "Customer persona to get guidance for"},
                "content_type": {"type": "string", "description": "Type of content being created"},
            },
            "required": ["persona"],
        },
    },
    {
        "name": "add_knowledge_source",
        "description": "Add a new source to the knowledge base",
        "inputSchema": {
            "type": "object",
            "properties": {
                "url": {"type": "string", "description": "URL of the knowledge source"},
                "source_type": {"type": "string", "enum": list(SOURCE_TYPES),
                                "description": "Type of knowledge source"},
                "description": {"type": "string", "description": "Description of the source"},
                "tags": {"type": "array", "items": {"type": "string"},
                         "description": "Tags to categorize the source"},
            },
            "required": ["url", "source_type"],
        },
    },
    {
        "name": "list_knowledge_sources",
        "description": "List available knowledge sources",
        "inputSchema": {
            "type": "object",
            "properties": {
                "filter_by_type": {"type": "string", "description": "Filter sources by type"},
                "search_term": {"type": "string", "description": "Search term to filter sources"},
            },
        },
    },
    {
        "name": "audit_content",
        "description": f"Perform comprehensive audit of content against the {settings.brand_name} framework",
        "inputSchema": {
            "type": "object",
            "properties": {
                "content": {"type": "string", "description": "Content to audit for framework compliance"},
                "content_type": {"type": "string", "description": "Type of content being audited"},
            },
            "required": ["content"],
        },
    },
    {
        "name": "redesign_content",
        "description": f"Redesign and transform content to align with the {settings.brand_name} framework",
        "inputSchema": {
            "type": "object",
            "properties": {
                "original_content": {"type": "string", "description": "Original content to redesign"},
                "content_type": {"type": "string", "enum": CONTENT_TYPE_VALUES,
                                 "description": "Type of content being redesigned"},
                "target_audience": {"type": "string", "enum": PERSONA_VALUES,
                                    "description": "Target audience for redesigned content"},
                "preserve_key_information": {"type": "boolean",
                                             "description": "Whether to preserve key facts and data from original",
                                             "default": True},
                "redesign_intensity": {"type": "string", "enum": [i.value for i in RedesignIntensity],
                                       "description": "Intensity of redesign transformation",
                                       "default": "moderate"},
                "specific_requirements": {"type": "array", "items": {"type": "string"},
                                          "description": "Specific requirements for the redesign"},
            },
            "required": ["original_content"],
        },
    },
]

TOOL_NAMES = frozenset(d["name"] for d in TOOL_DEFINITIONS)


def parse_tool_call(name: str, arguments: Optional[Dict[str, Any]]):
    """Validate ``arguments`` for tool ``name``; unknown names raise UnknownToolError."""
    if name not in TOOL_NAMES:
        raise UnknownToolError(name)
    return _tool_call_adapter.validate_python({"name": name, "arguments": arguments or {}})


class ToolRouter:
    """Owns the service objects and routes parsed tool calls to them."""

    def __init__(
        self,
        auditor: Optional[ContentAuditor] = None,
        generator: Optional[ContentGenerator] = None,
        redesigner: Optional[ContentRedesigner] = None,
        knowledge: Optional[KnowledgeManager] = None,
    ):
        self.auditor = auditor or ContentAuditor()
        self.generator = generator or ContentGenerator()
        self.redesigner = redesigner or ContentRedesigner(auditor=self.auditor, generator=self.generator)
        self._knowledge = knowledge
        self._lock = threading.Lock()

    @property
    def knowledge(self) -> KnowledgeManager:
        # Created on first use; loading may seed the JSON file.
        if self._knowledge is None:
            self._knowledge = KnowledgeManager()
        return self._knowledge

    def handle(self, name: str, arguments: Optional[Dict[str, Any]]) -> str:
        try:
            # One call at a time; the knowledge list and its file are not thread-safe.
            with self._lock:
                result = self.dispatch(parse_tool_call(name, arguments))
            return json.dumps(result, indent=2, default=str)
        except Exception as e:
            logger.exception("Tool %s failed", name)
            return f"Error executing {name}: {e}"

    def dispatch(self, call: ToolCall) -> Any:
        logger.debug("Dispatching %s", call.name)
        args = call.arguments

        match call:
            case AuditContentCall():
                return self.auditor.audit(args.content, args.content_type).to_dict()

            case RedesignContentCall():
                options = RedesignOptions(
                    content_type=args.content_type,
                    target_audience=args.target_audience,
                    preserve_key_information=args.preserve_key_information,
                    redesign_intensity=args.redesign_intensity,
                    specific_requirements=args.specific_requirements or [],
                )
                return self.redesigner.redesign(args.original_content, options).to_dict()

            case ValidateBrandComplianceCall():
                result = validate_brand_compliance(args.content, check_disclaimers=args.check_disclaimers)
                return {"content_type": args.content_type, **result.to_dict()}

            case GetPersonaGuidanceCall():
                guidance = get_persona_guidance(args.persona).to_dict()
                if args.content_type:
                    guidance["content_structure"] = CONTENT_STRUCTURES[ContentType.parse(args.content_type)]
                return guidance

            case CreateLibertyContentCall():
                request = ContentRequest(
                    topic=args.topic,
                    content_type=args.content_type,
                    target_audience=args.target_audience or AUTO_DETECT,
                    length_target=args.length_target or LengthTarget.MEDIUM.value,
                    include_cta=args.include_cta,
                )
                return self.generator.generate(request).to_dict()

            case GenerateSeoMetadataCall():
                topic = args.primary_keyword or derive_topic(args.content)
                metadata = build_seo_metadata(args.content, topic=topic, primary_keyword=args.primary_keyword)
                return {"content_type": args.content_type, **metadata.to_dict()}

            case SearchKnowledgeBaseCall():
                sources = self.knowledge.search(args.query, args.source_types, args.max_results)
                return [s.to_dict() for s in sources]

            case AddKnowledgeSourceCall():
                source = self.knowledge.add_source(args.url, args.source_type, args.description, args.tags)
                summary = source.summary()
                return {"success": True, "source": {k: summary[k] for k in ("id", "url", "source_type", "description", "tags")}}

            case ListKnowledgeSourcesCall():
                sources = self.knowledge.list_sources(args.filter_by_type, args.search_term)
                return {"stats": self.knowledge.stats(), "sources": sources}

            case _:
                raise UnknownToolError(getattr(call, "name", str(call)))
