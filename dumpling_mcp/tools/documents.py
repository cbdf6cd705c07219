"""
Document, image, video and audio extraction tools.

All of them accept either a public URL or base64 encoded content.
"""

from typing import Any, Dict, Optional

from ..base import ToolParameter
from ..proxy import ProxyTool, fields, pick, require_any
from ._common import FILE, JSON_MODE, MODEL, PROMPT, url


def _files_have_source(arguments: Dict[str, Any]) -> Optional[str]:
    files = arguments.get("files") or []
    if not files:
        return "At least one file is required"
    for index, item in enumerate(files):
        if not (item.get("url") or item.get("content")):
            return f"files[{index}] requires either url or content"
    return None


def document_text(data: Dict[str, Any]) -> str:
    return pick(data, "text")["text"]


doc_to_text = ProxyTool(
    name="doc-to-text",
    description="Convert a document (PDF, DOCX, ...) to plain text.",
    action="convert document to text",
    category="documents",
    parameters=(
        url("URL of the document", required=False),
        FILE,
        ToolParameter("pages", "string", "Page range to convert, e.g. '1-3,5'"),
    ),
    project=document_text,
    precondition=require_any("url", "file"),
)

extract_document = ProxyTool(
    name="extract-document",
    description="Extract structured data from one or more documents using a natural language prompt.",
    action="extract document data",
    category="documents",
    parameters=(
        PROMPT,
        ToolParameter(
            "files",
            "array",
            "Documents to read; each needs a url or base64 content",
            required=True,
            items=ToolParameter(
                "file",
                "object",
                properties=(
                    url("URL of the document", required=False),
                    ToolParameter("content", "string", "Base64 encoded document content"),
                    ToolParameter("filename", "string", "Original file name"),
                ),
            ),
        ),
        JSON_MODE,
        MODEL,
    ),
    project=fields("output", "creditUsage?"),
    precondition=_files_have_source,
)

extract_image = ProxyTool(
    name="extract-image",
    description="Extract information from an image using a natural language prompt.",
    action="extract image data",
    category="documents",
    parameters=(PROMPT, url("URL of the image", required=False), FILE, JSON_MODE, MODEL),
    project=fields("output", "creditUsage?"),
    precondition=require_any("url", "file"),
)

extract_video = ProxyTool(
    name="extract-video",
    description="Extract information from a video using a natural language prompt.",
    action="extract video data",
    category="documents",
    parameters=(PROMPT, url("URL of the video", required=False), FILE, JSON_MODE, MODEL),
    project=fields("output", "creditUsage?"),
    precondition=require_any("url", "file"),
)

extract_audio = ProxyTool(
    name="extract-audio",
    description="Transcribe or extract information from an audio file using a natural language prompt.",
    action="extract audio data",
    category="documents",
    parameters=(PROMPT, url("URL of the audio file", required=False), FILE, JSON_MODE, MODEL),
    project=fields("output", "creditUsage?"),
    precondition=require_any("url", "file"),
)
