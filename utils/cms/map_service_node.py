from typing import Any
from models.cms.service import Service
from utils.cms.slugify_title import slugify_title


def map_service_node(node: dict[str, Any]) -> Service:
    """
    Convert a CMS service node into a Service.

    Args:
        node: A `service` object with `id`, `title` and `serviceFields`

    Returns:
        The mapped Service
    """
    fields = node.get("serviceFields") or {}

    return Service(
        id=node["id"],
        title=node["title"],
        slug=slugify_title(node["title"]),
        price=fields.get("price") or 0.0,
        duration=fields.get("duration"),
        description=fields.get("description") or "",
        featured=bool(fields.get("featured")),
    )
