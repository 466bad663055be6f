"""
Document -> DTO extraction.

Everything that knows about Invidious markup or API field names lives here,
so a change upstream only touches this package.
"""

from invidious_relay.extractors.markup import parse_comments, parse_video_list, parse_video_page
from invidious_relay.extractors.structured import parse_search_results

__all__ = ["parse_comments", "parse_video_list", "parse_video_page", "parse_search_results"]
