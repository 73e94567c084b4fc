"""
Request resolution
Turns a request path + query string into (resource, id, action, sub-resource)
"""
from dataclasses import dataclass
from typing import List, Mapping, Optional

API_ROOT = "api"
BULK = "bulk"
PATH_ACTIONS = frozenset({"login", "register", "me"})


@dataclass
class ResolvedRoute:
    resource: str = ""
    id: Optional[int] = None
    action: str = ""
    sub_resource: str = ""

    @property
    def is_bulk(self) -> bool:
        return self.action == BULK


def split_path(path: str) -> List[str]:
    """Path segments with the API root removed"""
    return [part for part in path.split("/") if part and part != API_ROOT]


def _to_id(value: Optional[str]) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def resolve_route(path: str, query: Mapping[str, str]) -> ResolvedRoute:
    """
    Resolution order, first match wins:

    1. explicit ?resource=&id=&action= query parameters
    2. path segments: /{resource}[/{bulk|login|register|me|<id>|<action>}[/{sub_resource}]]
    3. alias: /projects/categories[/bulk|/<id>] -> project-categories

    ?action= is honoured alongside path routing (/blog-posts/5?action=like).
    """
    route = ResolvedRoute(
        resource=query.get("resource") or "",
        id=_to_id(query.get("id")),
        action=query.get("action") or "",
    )
    parts = split_path(path)

    if not route.resource and parts:
        route.resource = parts[0]
        if len(parts) > 1:
            segment = parts[1]
            if segment == BULK:
                route.action = BULK
            elif segment in PATH_ACTIONS:
                route.action = segment
            elif _to_id(segment) is not None:
                route.id = _to_id(segment)
                if len(parts) > 2:
                    route.sub_resource = parts[2]
            else:
                route.action = segment

    if len(parts) > 1 and parts[0] == "projects" and parts[1] == "categories":
        route.resource = "project-categories"
        route.action = ""
        route.sub_resource = ""
        if len(parts) > 2 and parts[2] == BULK:
            route.action = BULK
            route.id = None
        elif len(parts) > 2 and _to_id(parts[2]) is not None:
            route.id = _to_id(parts[2])

    return route
