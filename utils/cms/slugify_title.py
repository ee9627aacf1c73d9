import re


def slugify_title(title: str) -> str:
    """Lower-case a CMS title and join its words with hyphens."""
    return re.sub(r"\s+", "-", title.lower())
