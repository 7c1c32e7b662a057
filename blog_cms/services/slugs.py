from blog_cms.errors.validation import ValidationError
from blog_cms.utils.helpers import slugify


def derive_slug(text: str, field: str = "name") -> str:
    """
    Slugify ``text`` and reject names that leave nothing URL-safe.

    Raises:
        ValidationError: If the slug comes out empty
    """
    slug = slugify(text)
    if not slug:
        raise ValidationError(
            "Could not generate a valid slug",
            [{"field": field, "message": "Must contain at least one letter or digit"}],
        )
    return slug
