from typing import Any
from models.cms.artist import Artist


def map_artist_node(node: dict[str, Any]) -> Artist:
    """
    Convert a CMS team member node into an Artist.

    Args:
        node: A `teamMember` object with `id`, `title` and `teammemberfields`

    Returns:
        The mapped Artist
    """
    fields = node.get("teammemberfields") or {}

    specialties = [
        specialty.strip()
        for specialty in (fields.get("specialtiesSeparatedByCommas") or "").split(",")
        if specialty.strip()
    ]

    picture = fields.get("profilePicture") or {}
    image = (picture.get("node") or {}).get("sourceUrl")

    return Artist(
        id=node["id"],
        name=node["title"],
        role=fields.get("role"),
        bio=fields.get("bio"),
        specialties=specialties,
        experience=fields.get("experience"),
        image=image,
        calendar_id=fields.get("calendarId") or None,
    )
