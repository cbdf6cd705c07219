"""YouTube transcript tool."""

from typing import Any, Dict

from ..base import ToolParameter
from ..proxy import ProxyTool, pick


def format_transcript(data: Dict[str, Any]) -> str:
    found = pick(data, "transcript", "language?")
    lines = [f"Transcript: {found['transcript']}"]
    if "language" in found:
        lines.append(f"Language: {found['language']}")
    return "\n".join(lines)


get_youtube_transcript = ProxyTool(
    name="get-youtube-transcript",
    description="Fetch the transcript of a YouTube video, optionally with timestamps.",
    action="fetch YouTube transcript",
    category="video",
    parameters=(
        ToolParameter("videoUrl", "string", "URL of the YouTube video", required=True, format="uri"),
        ToolParameter("includeTimestamps", "boolean", "Include timestamps in the transcript"),
        ToolParameter("timestampsToCombine", "number", "Number of timestamps to merge into one segment"),
        ToolParameter("preferredLanguage", "string", "Preferred transcript language code (e.g. 'en')"),
    ),
    project=format_transcript,
)
