import datetime
import math
import re

from homepage.schemas.blog import BlogPost, ReadingTime

WORDS_PER_MINUTE = 200
POST_EXTENSION_RE = re.compile(r"\.mdx?$")


def calculate_reading_time(text: str) -> ReadingTime:
    words = text.split()
    minutes = math.ceil(len(words) / WORDS_PER_MINUTE) or 1
    return ReadingTime(text=f"{minutes} min read", minutes=minutes, words=len(words))


def format_date(value: str) -> str:
    """Format an ISO date or datetime string as e.g. "January 5, 2021".

    Raises ValueError for anything fromisoformat can't read.
    """
    parsed = datetime.datetime.fromisoformat(value.strip())
    return f"{parsed:%B} {parsed.day}, {parsed.year}"


def resolve_slug(post: BlogPost) -> str:
    """Explicit frontmatter slug, else the file path without its .md/.mdx extension."""
    return post.meta.slug or POST_EXTENSION_RE.sub("", post.filePath)
