import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from grubdash.chain import Chain, RequestContext
from grubdash.guards import body_data_has, entity_exists, id_matches_route
from grubdash.ids import next_id
from grubdash.metrics import records_created_total
from grubdash.payload import read_data
from grubdash.store import MemoryStore
from grubdash.validators import price_is_valid

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dishes", tags=["dishes"])

REQUIRED_FIELDS = ["name", "description", "image_url"]
MUTABLE_FIELDS = ["name", "description", "price", "image_url"]


def _store(request: Request) -> MemoryStore:
    return request.app.state.dish_store


def list_dishes(store: MemoryStore):
    def handler(ctx: RequestContext) -> JSONResponse:
        return JSONResponse(status_code=200, content={"data": store.all()})
    return handler


def create_dish(store: MemoryStore):
    def handler(ctx: RequestContext) -> JSONResponse:
        dish = {**ctx.data, "id": next_id()}
        store.insert(dish)
        records_created_total.labels(entity="dish").inc()
        logger.info("Created dish id=%s", dish["id"])
        return JSONResponse(status_code=201, content={"data": dish})
    return handler


def read_dish(ctx: RequestContext) -> JSONResponse:
    return JSONResponse(status_code=200, content={"data": ctx.locals["dish"]})


def update_dish(ctx: RequestContext) -> JSONResponse:
    dish = ctx.locals["dish"]
    for field in MUTABLE_FIELDS:
        dish[field] = ctx.data.get(field)
    logger.info("Updated dish id=%s", dish["id"])
    return JSONResponse(status_code=200, content={"data": dish})


def create_chain(store: MemoryStore) -> Chain:
    return Chain(
        guards=[*(body_data_has("Dish", f) for f in REQUIRED_FIELDS), price_is_valid],
        handler=create_dish(store),
    )


def read_chain(store: MemoryStore) -> Chain:
    return Chain(guards=[entity_exists("Dish", store, "dishId")], handler=read_dish)


def update_chain(store: MemoryStore) -> Chain:
    return Chain(
        guards=[
            entity_exists("Dish", store, "dishId"),
            id_matches_route("Dish", "dishId"),
            *(body_data_has("Dish", f) for f in REQUIRED_FIELDS),
            price_is_valid,
        ],
        handler=update_dish,
    )


@router.get("")
async def list_route(request: Request) -> JSONResponse:
    store = _store(request)
    return Chain(guards=[], handler=list_dishes(store))(RequestContext())


@router.post("")
async def create_route(request: Request) -> JSONResponse:
    store = _store(request)
    ctx = RequestContext(data=await read_data(request))
    with store.lock:
        return create_chain(store)(ctx)


@router.get("/{dish_id}")
async def read_route(dish_id: str, request: Request) -> JSONResponse:
    store = _store(request)
    ctx = RequestContext(params={"dishId": dish_id})
    return read_chain(store)(ctx)


@router.put("/{dish_id}")
async def update_route(dish_id: str, request: Request) -> JSONResponse:
    store = _store(request)
    ctx = RequestContext(params={"dishId": dish_id}, data=await read_data(request))
    with store.lock:
        return update_chain(store)(ctx)
