from typing import List

import re2

# RE2 scans in linear time, so a long run of local-part characters with no `@`
# (minified scripts, base64 blobs) cannot stall a crawl task.
EMAIL_PATTERN = re2.compile(r"[a-zA-Z0-9~_\-+]+@(?:[a-zA-Z\-]+\.?)+")

# Absolute http(s) links inside a double-quoted href attribute. The match keeps
# the `href="` prefix and closing quote; LinkProcessor strips them. RE2 word
# boundaries are ASCII-only.
LINK_PATTERN = re2.compile(
    r'href="https?://(?:www\.)?[-a-zA-Z0-9@:%._\+~#=]{1,256}\.[a-zA-Z0-9()]{1,6}\b'
    r'(?:[-a-zA-Z0-9()@:%_\+.~#?&/=]*)"'
)


class ContentReviewService:
    def extract_emails(self, text: str) -> List[str]:
        """All email-shaped substrings, duplicates kept, in order of appearance."""
        return [m.group(0) for m in EMAIL_PATTERN.finditer(text)]

    def extract_links(self, text: str) -> List[str]:
        """Raw `href="..."` matches for absolute http(s) links."""
        return [m.group(0) for m in LINK_PATTERN.finditer(text)]
