"""Web page tools: scrape, crawl, screenshot."""

from ..base import ToolParameter
from ..proxy import ProxyTool, fields
from ._common import CLEANED, FORMAT, RENDER_JS, url

scrape = ProxyTool(
    name="scrape",
    description="Scrape a single web page and return its content as markdown, HTML or a screenshot.",
    action="scrape content",
    category="web",
    parameters=(url("URL of the page to scrape"), FORMAT, CLEANED, RENDER_JS),
    project=fields("title?", "content", "metadata?", "url", "format?", "cleaned?"),
)

crawl = ProxyTool(
    name="crawl",
    description="Crawl a website starting from a URL and return the content of the visited pages.",
    action="crawl website",
    category="web",
    parameters=(
        url("URL to start crawling from"),
        ToolParameter("limit", "integer", "Maximum number of pages to crawl"),
        ToolParameter("depth", "integer", "Maximum link depth from the start URL"),
        FORMAT,
        CLEANED,
        RENDER_JS,
    ),
    project=fields("baseUrl?", "pages", "creditUsage?"),
)

screenshot = ProxyTool(
    name="screenshot",
    description="Capture a screenshot of a web page and return a link to the image.",
    action="capture screenshot",
    category="web",
    parameters=(
        url("URL of the page to capture"),
        ToolParameter("viewportWidth", "integer", "Viewport width in pixels"),
        ToolParameter("viewportHeight", "integer", "Viewport height in pixels"),
        ToolParameter("fullPage", "boolean", "Capture the full scrollable page"),
        ToolParameter("blockCookieBanners", "boolean", "Hide cookie consent banners"),
        ToolParameter("autoScroll", "boolean", "Scroll through the page to trigger lazy loading"),
        RENDER_JS,
        ToolParameter("waitFor", "integer", "Milliseconds to wait before capturing"),
    ),
    project=fields("screenshotUrl", "creditUsage?"),
)
