from blog_cms.utils.helpers import (
    get_summary,
    host,
    normalize_email,
    parse_uuid,
    slugify,
    split_ids,
    utc_now,
)

__all__ = [
    "get_summary",
    "host",
    "normalize_email",
    "parse_uuid",
    "slugify",
    "split_ids",
    "utc_now",
]
