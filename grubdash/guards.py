"""
Guard primitives shared by the dish and order chains.
"""
from grubdash.chain import Guard, RequestContext
from grubdash.errors import InvalidInput, NotFound
from grubdash.store import MemoryStore


def body_data_has(entity: str, field: str) -> Guard:
    """Require data[field] to be present and truthy. Empty lists and objects count as present."""
    def guard(ctx: RequestContext):
        value = ctx.data.get(field)
        if isinstance(value, (list, dict)) or value:
            return None
        return InvalidInput(f"{entity} must include a {field}")
    guard.__name__ = f"body_data_has_{field}"
    return guard


def entity_exists(entity: str, store: MemoryStore, param: str) -> Guard:
    """Resolve the path id to a stored record and put it in ctx.locals under the lowercased entity name."""
    key = entity.lower()

    def guard(ctx: RequestContext):
        record_id = ctx.params.get(param)
        found = store.find(record_id)
        if found is None:
            return NotFound(f"{entity} ID not found: {record_id}")
        ctx.locals[key] = found
        return None
    guard.__name__ = f"{key}_exists"
    return guard


def id_matches_route(entity: str, param: str) -> Guard:
    """A truthy body id must equal the path id exactly."""
    def guard(ctx: RequestContext):
        body_id = ctx.data.get("id")
        route_id = ctx.params.get(param)
        if body_id and body_id != route_id:
            return InvalidInput(
                f"{entity} id does not match route id. {entity}: {body_id}, Route: {route_id}"
            )
        return None
    guard.__name__ = "id_matches_route"
    return guard
