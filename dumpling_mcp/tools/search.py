"""
Google search tools: web, autocomplete, maps, places, news and reviews.
"""

from typing import Any, Dict, List

from ..base import ToolParameter
from ..proxy import ProxyTool, fields, pick, require_any
from ._common import (
    CLEANED,
    COUNTRY,
    DATE_RANGE,
    FORMAT,
    LANGUAGE,
    LOCATION,
    PAGE,
    query,
)


def _organic_result(item: Dict[str, Any]) -> Dict[str, Any]:
    result = pick(item, "title?", "link?", "snippet?", "position?")
    scraped = item.get("scrapeOutput")
    if scraped and scraped.get("content") is not None:
        result["content"] = scraped["content"]
    return result


def format_search_results(data: Dict[str, Any]) -> Dict[str, Any]:
    organic: List[Dict[str, Any]] = pick(data, "organic")["organic"]
    formatted = pick(data, "searchParameters")
    formatted["organicResults"] = [_organic_result(item) for item in organic]
    formatted.update(pick(data, "featuredSnippet?", "relatedSearches?", "peopleAlsoAsk?"))
    return formatted


search = ProxyTool(
    name="search",
    description=(
        "Perform a Google web search. Optionally scrape the content of the top "
        "results and include it in the response."
    ),
    action="perform search",
    category="search",
    parameters=(
        query(),
        COUNTRY,
        LOCATION,
        LANGUAGE,
        DATE_RANGE,
        PAGE,
        ToolParameter("scrapeResults", "boolean", "Scrape the content of the search results"),
        ToolParameter("numResultsToScrape", "integer", "How many results to scrape when scrapeResults is set"),
        ToolParameter(
            "scrapeOptions",
            "object",
            "Options applied to scraped results",
            properties=(FORMAT, CLEANED),
        ),
    ),
    project=format_search_results,
)

get_autocomplete = ProxyTool(
    name="get-autocomplete",
    description="Get Google search autocomplete suggestions for a query.",
    action="get autocomplete suggestions",
    category="search",
    parameters=(query("Partial query to complete"), LOCATION, COUNTRY, LANGUAGE),
    project=fields("searchParameters", "suggestions"),
)

search_maps = ProxyTool(
    name="search-maps",
    description="Search Google Maps for places matching a query.",
    action="perform maps search",
    category="search",
    parameters=(
        query(),
        ToolParameter("gpsPositionZoom", "string", "GPS position and zoom level, e.g. '@40.7,-74.0,14z'"),
        ToolParameter("placeId", "string", "Google place ID"),
        ToolParameter("cid", "string", "Google customer ID of a place"),
        LANGUAGE,
        PAGE,
    ),
    project=fields("searchParameters", "ll?", "places"),
)

search_places = ProxyTool(
    name="search-places",
    description="Search Google Places for businesses and locations.",
    action="perform places search",
    category="search",
    parameters=(query(), COUNTRY, LOCATION, LANGUAGE, PAGE),
    project=fields("searchParameters", "places"),
)

search_news = ProxyTool(
    name="search-news",
    description="Search Google News for recent articles.",
    action="perform news search",
    category="search",
    parameters=(query(), COUNTRY, LOCATION, LANGUAGE, DATE_RANGE, PAGE),
    project=fields("searchParameters", "news"),
)

get_google_reviews = ProxyTool(
    name="get-google-reviews",
    description="Fetch Google reviews for a place, identified by place ID or business name.",
    action="get Google reviews",
    category="search",
    parameters=(
        ToolParameter("placeId", "string", "Google place ID"),
        ToolParameter("businessName", "string", "Business name, used when placeId is unknown"),
        LOCATION,
        LANGUAGE,
        ToolParameter("limit", "integer", "Maximum number of reviews"),
        ToolParameter("sortBy", "string", "Review ordering", enum=("relevance", "newest")),
    ),
    precondition=require_any("placeId", "businessName"),
)
