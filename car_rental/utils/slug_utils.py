"""Slug generation for makes and car models."""
from slugify import slugify

from car_rental.domain.exceptions import ValidationError


def make_slug(value: str, field: str = "name") -> str:
    """
    Derive a URL-safe slug from a human-readable name.

    Lowercases, transliterates to ASCII and joins words with single hyphens,
    so "A5 Coupé" becomes "a5-coupe". Applying it to its own output is a no-op.

    Raises:
        ValidationError: If the name has no sluggable characters
    """
    slug = slugify(value or "")
    if not slug:
        raise ValidationError(field, f"Cannot derive a slug from {value!r}.")
    return slug
