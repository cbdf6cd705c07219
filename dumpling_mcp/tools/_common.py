"""Parameter declarations shared by several tool modules."""

from ..base import ToolParameter

DATE_RANGES = ("anyTime", "pastHour", "pastDay", "pastWeek", "pastMonth", "pastYear")
SCRAPE_FORMATS = ("markdown", "html", "screenshot")


def query(description: str = "Search query") -> ToolParameter:
    return ToolParameter("query", "string", description, required=True)


def url(description: str, required: bool = True) -> ToolParameter:
    return ToolParameter("url", "string", description, required=required, format="uri")


COUNTRY = ToolParameter("country", "string", "Country code for localized results (e.g. 'US')")
LOCATION = ToolParameter("location", "string", "Location to search from (e.g. 'London, United Kingdom')")
LANGUAGE = ToolParameter("language", "string", "Language code for results (e.g. 'en')")
PAGE = ToolParameter("page", "integer", "Page number of results")
DATE_RANGE = ToolParameter("dateRange", "string", "Restrict results to a time range", enum=DATE_RANGES)

FORMAT = ToolParameter("format", "string", "Output format of the scraped content", enum=SCRAPE_FORMATS)
CLEANED = ToolParameter("cleaned", "boolean", "Strip navigation, ads and boilerplate from the content")
RENDER_JS = ToolParameter("renderJs", "boolean", "Render JavaScript before extracting content")

PROMPT = ToolParameter("prompt", "string", "What to extract, in natural language", required=True)
FILE = ToolParameter("file", "string", "Base64 encoded file content (alternative to url)")
JSON_MODE = ToolParameter("jsonMode", "boolean", "Return the output as structured JSON")
MODEL = ToolParameter("model", "string", "Model to use for extraction")
