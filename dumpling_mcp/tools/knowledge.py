"""Knowledge base tools."""

from ..base import ToolParameter
from ..proxy import ProxyTool, fields
from ._common import url

KNOWLEDGE_BASE_ID = ToolParameter("knowledgeBaseId", "string", "ID of the knowledge base", required=True)

add_to_knowledge_base = ProxyTool(
    name="add-to-knowledge-base",
    description="Add a piece of content to a knowledge base.",
    action="add content to knowledge base",
    category="knowledge",
    parameters=(
        KNOWLEDGE_BASE_ID,
        ToolParameter("content", "string", "Text content to store", required=True),
        ToolParameter("title", "string", "Title of the resource"),
        url("Source URL of the content", required=False),
        ToolParameter("metadata", "object", "Arbitrary metadata stored with the resource"),
    ),
    project=fields("resource", "creditUsage?"),
)

search_knowledge_base = ProxyTool(
    name="search-knowledge-base",
    description="Search a knowledge base for content relevant to a query.",
    action="search knowledge base",
    category="knowledge",
    parameters=(
        KNOWLEDGE_BASE_ID,
        ToolParameter("query", "string", "Search query", required=True),
        ToolParameter("resultCount", "integer", "Number of results to return"),
    ),
    project=fields("results"),
)
