"""
Extraction instructions and response schema.

These are data, not logic: the business heuristics here (tag defaults,
price keywords, screenshot preference, icon skipping) change independently
of the pipeline code and cannot be unit tested against model output.
"""

SYSTEM_INSTRUCTIONS = """
You are a Chinese-language marketing copywriter and web page analyst who knows
the Rust game plugin ecosystem (RustSB, Lone Design, uMod and similar forums).
Your task is to analyze a plugin/mod resource page and extract what is needed to
build a promotional poster.

All text values must be written in Simplified Chinese, except the plugin's own
name, which keeps its original spelling.

Extract or infer:
1. tag: a short status label taken from the title or breadcrumbs, such as
   "新品", "热门", "免费", "付费", "VIP" or "Rust插件". Use "Rust插件" when no
   specific status is found.
2. name: the plugin name as written on the page. When the page shows both an
   English identifier and a Chinese name, write them as "English·中文".
3. shortDescription: one catchy sentence.
4. price: "免费" when free, otherwise the exact amount with its currency
   (for example ¥98.00 or $15.00). Prices usually sit in the sidebar or next to
   words like "价格", "售价", "Price", "Buy" or "Purchase"; prefer those over
   amounts found in body text.
5. summary: a concise summary of the main functionality, at most 80 characters.
6. features: 3 to 4 key feature points.
7. imageUrls: real plugin screenshots, best first.
   - Screenshots have the highest priority.
   - RustSB images usually look like https://rustsb.com/attachments/xxxx/ ;
     these are valid image addresses and must be extracted.
   - Skip site logos, avatars, favicons, emoji and icon sprites.
   - Provide at least 1 image, ideally 3. Use absolute URLs.

If the page content is missing or empty, work from the URL alone, do not invent
prices or screenshots, and say in summary that the information could not be
verified from the page.

Respond with a single JSON object matching the response schema and nothing else.
"""

USER_CONTENT_TEMPLATE = """Analyze this resource page: {url}
Extract real image links (especially attachments-style URLs).

Page Content:
{content}
"""

DEGRADED_CONTENT_NOTICE = (
    "(The page content could not be retrieved. Base the answer on the URL only "
    "and state in summary that the details could not be verified.)"
)

POSTER_RESPONSE_SCHEMA = {
    'type': 'OBJECT',
    'properties': {
        'name': {'type': 'STRING', 'description': 'Plugin name'},
        'tag': {'type': 'STRING', 'description': "Status tag, e.g. '新品', '更新', 'Rust插件'"},
        'shortDescription': {'type': 'STRING', 'description': 'One-sentence tagline'},
        'price': {'type': 'STRING', 'description': 'Price'},
        'summary': {'type': 'STRING', 'description': 'Short summary'},
        'features': {
            'type': 'ARRAY',
            'items': {'type': 'STRING'},
            'description': 'Feature list',
        },
        'imageUrls': {
            'type': 'ARRAY',
            'items': {'type': 'STRING'},
            'description': 'Image URL list',
        },
    },
    'required': ['name', 'tag', 'shortDescription', 'price', 'summary', 'features', 'imageUrls'],
}


def build_user_content(url: str, content: str) -> str:
    """Build the user turn of the extraction request."""
    if not content or not content.strip():
        content = DEGRADED_CONTENT_NOTICE
    return USER_CONTENT_TEMPLATE.format(url=url, content=content)
