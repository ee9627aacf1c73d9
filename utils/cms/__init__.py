from utils.cms.map_artist_node import map_artist_node
from utils.cms.map_service_node import map_service_node
from utils.cms.slugify_title import slugify_title

__all__ = [
    "map_artist_node",
    "map_service_node",
    "slugify_title",
]
