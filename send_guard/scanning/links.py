"""
External link extraction.

Pulls candidate URLs from the HTML and plain-text bodies with literal
pattern scans rather than a markup parse. Only double-quoted href
attributes are recognised in HTML.
"""

import logging
import re
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)

HREF_PATTERN = re.compile(r'href="([^"]+)"', re.IGNORECASE)
BARE_URL_PATTERN = re.compile(r'(https?://[^\s<]+)')


def extract_external_links(html: Optional[str], text: Optional[str], internal_domain: str) -> List[str]:
    """
    Collect external links from both body channels.

    Links are deduplicated by exact string and returned in order of first
    discovery, HTML hrefs before bare text URLs. mailto: links and any link
    containing internal_domain as a substring are dropped.

    Note that the internal-domain test is a plain substring match, so a host
    such as "innobothealth.com.attacker.net" is treated as internal. Known
    weakness, kept as-is.

    Args:
        html: HTML body, may be empty
        text: Plain-text body, may be empty
        internal_domain: Organisation domain; empty disables the filter

    Returns:
        List[str]: Ordered unique external links
    """
    # dict keeps insertion order and acts as the ordered set
    links: Dict[str, None] = {}

    if html:
        for match in HREF_PATTERN.finditer(html):
            links.setdefault(match.group(1), None)

    if text:
        for match in BARE_URL_PATTERN.finditer(text):
            links.setdefault(match.group(1), None)

    external = [
        link for link in links
        if not link.lower().startswith("mailto:")
        and not (internal_domain and internal_domain in link)
    ]
    logger.debug(f"Extracted {len(links)} candidate links, {len(external)} external")
    return external
