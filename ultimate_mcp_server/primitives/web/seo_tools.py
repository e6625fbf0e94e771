"""SEO tools - meta tags, robots.txt and XML sitemaps."""
from typing import Any

from ...tool_decorator import Tool
from .. import _runtime
from .._helpers import iso_date, num_str
from . import CATEGORY

MAX_TITLE_LENGTH = 60
MAX_DESCRIPTION_LENGTH = 160

SITEMAP_FREQUENCIES = ("always", "hourly", "daily", "weekly", "monthly", "yearly", "never")


@Tool(
    "generate_seo_meta",
    CATEGORY,
    "Generate SEO meta tags for a webpage",
    {
        "type": "object",
        "properties": {
            "title": {"type": "string"},
            "description": {"type": "string"},
            "keywords": {"type": "array", "items": {"type": "string"}},
            "url": {"type": "string"},
            "image_url": {"type": "string"},
            "author": {"type": "string"},
        },
        "required": ["title", "description"],
    },
)
def generate_seo_meta(
    title: str,
    description: str,
    keywords: list[str] | None = None,
    url: str = "",
    image_url: str = "",
    author: str = "",
) -> dict[str, Any]:
    """Build primary, Open Graph and Twitter meta tags.

    Title and description are cut to 60 and 160 characters in the tags; the
    returned lengths and warnings refer to the input as given. Optional tags
    that do not apply leave an empty line in the block.
    """
    keywords = keywords or []
    short_title = title[:MAX_TITLE_LENGTH]
    short_desc = description[:MAX_DESCRIPTION_LENGTH]

    def optional(condition: Any, tag: str) -> str:
        return tag if condition else ""

    lines = [
        "<!-- Primary Meta Tags -->",
        f"<title>{short_title}</title>",
        f'<meta name="title" content="{short_title}">',
        f'<meta name="description" content="{short_desc}">',
        optional(keywords, f'<meta name="keywords" content="{", ".join(keywords)}">'),
        optional(author, f'<meta name="author" content="{author}">'),
        "",
        "<!-- Open Graph / Facebook -->",
        '<meta property="og:type" content="website">',
        optional(url, f'<meta property="og:url" content="{url}">'),
        f'<meta property="og:title" content="{short_title}">',
        f'<meta property="og:description" content="{short_desc}">',
        optional(image_url, f'<meta property="og:image" content="{image_url}">'),
        "",
        "<!-- Twitter -->",
        '<meta property="twitter:card" content="summary_large_image">',
        optional(url, f'<meta property="twitter:url" content="{url}">'),
        f'<meta property="twitter:title" content="{short_title}">',
        f'<meta property="twitter:description" content="{short_desc}">',
        optional(image_url, f'<meta property="twitter:image" content="{image_url}">'),
    ]

    warnings = []
    if len(title) > MAX_TITLE_LENGTH:
        warnings.append("Title too long (max 60 chars)")
    if len(description) > MAX_DESCRIPTION_LENGTH:
        warnings.append("Description too long (max 160 chars)")
    if not keywords:
        warnings.append("No keywords provided")

    return {
        "html": "\n".join(lines),
        "title_length": len(title),
        "title_ok": len(title) <= MAX_TITLE_LENGTH,
        "description_length": len(description),
        "description_ok": len(description) <= MAX_DESCRIPTION_LENGTH,
        "warnings": warnings,
    }


@Tool(
    "generate_robots_txt",
    CATEGORY,
    "Generate robots.txt content",
    {
        "type": "object",
        "properties": {
            "sitemap_url": {"type": "string"},
            "disallowed_paths": {"type": "array", "items": {"type": "string"}},
            "crawl_delay": {"type": "number"},
            "allow_all": {"type": "boolean", "default": True},
        },
    },
)
def generate_robots_txt(
    sitemap_url: str | None = None,
    disallowed_paths: list[str] | None = None,
    crawl_delay: float | None = None,
    allow_all: bool = True,
) -> dict[str, Any]:
    content = "User-agent: *\n"
    if allow_all:
        content += "Allow: /\n"
    for path in disallowed_paths or []:
        content += f"Disallow: {path}\n"
    if crawl_delay:
        content += f"Crawl-delay: {num_str(crawl_delay)}\n"
    if sitemap_url:
        content += f"\nSitemap: {sitemap_url}\n"
    return {"robots_txt": content}


@Tool(
    "generate_sitemap",
    CATEGORY,
    "Generate XML sitemap for a website",
    {
        "type": "object",
        "properties": {
            "base_url": {"type": "string"},
            "pages": {
                "type": "array",
                "items": {"type": "string"},
                "description": "List of page paths e.g. /about, /contact",
            },
            "change_freq": {"type": "string", "enum": list(SITEMAP_FREQUENCIES), "default": "weekly"},
            "priority": {"type": "number", "default": 0.8},
        },
        "required": ["base_url", "pages"],
    },
)
def generate_sitemap(
    base_url: str,
    pages: list[str],
    change_freq: str = "weekly",
    priority: float = 0.8,
) -> dict[str, Any]:
    """Every page gets today's date (UTC) as lastmod."""
    today = iso_date(_runtime.utc_now())
    entries = "\n".join(
        "  <url>\n"
        f"    <loc>{base_url}{page}</loc>\n"
        f"    <lastmod>{today}</lastmod>\n"
        f"    <changefreq>{change_freq}</changefreq>\n"
        f"    <priority>{num_str(priority)}</priority>\n"
        "  </url>"
        for page in pages
    )
    xml = (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">\n'
        f"{entries}\n"
        "</urlset>"
    )
    return {"xml": xml, "page_count": len(pages)}
