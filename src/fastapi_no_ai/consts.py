from typing import Tuple

AI_AGENTS: Tuple[str, ...] = (
    "AI2Bot",
    "Ai2Bot-Dolma",
    "AdsBot-Google2",
    "Amazonbot",
    "anthropic-ai",
    "Applebot",
    "Applebot-Extended",
    "ArcMobile",
    "AwarioRssBot",
    "AwarioSmartBot",
    "Bytespider",
    "CCBot",
    "ChatGPT-User",
    "Claude-Web",
    "ClaudeBot",
    "cohere-ai",
    "DataForSeoBot",
    "Diffbot",
    "DuckAssistBot",
    "FacebookBot",
    "FriendlyCrawler",
    "Google-Extended",
    "Googlebot-Image",
    "GoogleOther",
    "GoogleOther-Image",
    "GoogleOther-Video",
    "GPTBot",
    "iaskspider/2.0",
    "ICC-Crawler",
    "ImagesiftBot",
    "img2dataset",
    "ISSCyberRiskCrawler",
    "Kangaroo Bot",
    "Meta-ExternalAgent",
    "Meta-ExternalFetcher",
    "OAI-SearchBot",
    "magpie-crawler",
    "Meltwater",
    "msnbot-media",
    "omgili",
    "omgilibot",
    "PanguBot",
    "peer39_crawler",
    "PerplexityBot",
    "PetalBot",
    "PiplBot",
    "Scrapy",
    "Seekr",
    "Sidetrade indexer bot",
    "scoop.it",
    "Timpibot",
    "VelenPublicWebCrawler",
    "Webzio-Extended",
    "yandex",
    "YouBot",
)
"""User-Agent substrings that get redirected. Matching is case-sensitive and
unanchored; the order only affects the generated robots.txt"""

USER_AGENT_HEADER = b"user-agent"
"""Header name as it appears in an ASGI scope (lower-cased bytes)"""

LOCATION_HEADER = "location"

CACHE_BUSTING_SEPARATOR = "?="
"""Joins the redirect URL and the per-request token when refetching is forced"""

ROBOTS_TXT_PATH = "/robots.txt"
