import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, Response

from grubdash.chain import Chain, RequestContext
from grubdash.guards import body_data_has, entity_exists, id_matches_route
from grubdash.ids import next_id
from grubdash.metrics import order_status_updates_total, orders_deleted_total, records_created_total
from grubdash.order_state import DEFAULT_STATUS
from grubdash.payload import read_data
from grubdash.store import MemoryStore
from grubdash.validators import dishes_is_valid, status_is_known, status_is_pending, status_is_valid

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/orders", tags=["orders"])

REQUIRED_FIELDS = ["deliverTo", "mobileNumber", "dishes"]
MUTABLE_FIELDS = ["deliverTo", "mobileNumber", "status", "dishes"]


def _store(request: Request) -> MemoryStore:
    return request.app.state.order_store


def list_orders(store: MemoryStore):
    def handler(ctx: RequestContext) -> JSONResponse:
        return JSONResponse(status_code=200, content={"data": store.all()})
    return handler


def create_order(store: MemoryStore):
    def handler(ctx: RequestContext) -> JSONResponse:
        order = {"status": DEFAULT_STATUS, **ctx.data, "id": next_id()}
        store.insert(order)
        records_created_total.labels(entity="order").inc()
        logger.info("Created order id=%s status=%s", order["id"], order["status"])
        return JSONResponse(status_code=201, content={"data": order})
    return handler


def read_order(ctx: RequestContext) -> JSONResponse:
    return JSONResponse(status_code=200, content={"data": ctx.locals["order"]})


def update_order(ctx: RequestContext) -> JSONResponse:
    order = ctx.locals["order"]
    previous = order.get("status")
    for field in MUTABLE_FIELDS:
        order[field] = ctx.data.get(field)
    order_status_updates_total.labels(status=order["status"]).inc()
    logger.info("Updated order id=%s status %s -> %s", order["id"], previous, order["status"])
    return JSONResponse(status_code=200, content={"data": order})


def destroy_order(store: MemoryStore):
    def handler(ctx: RequestContext) -> Response:
        order = ctx.locals["order"]
        index = store.index_of(order)
        if index >= 0:
            store.remove(index)
        orders_deleted_total.inc()
        logger.info("Deleted order id=%s", order["id"])
        return Response(status_code=204)
    return handler


def create_chain(store: MemoryStore) -> Chain:
    return Chain(
        guards=[
            *(body_data_has("Order", f) for f in REQUIRED_FIELDS),
            dishes_is_valid,
            status_is_known,
        ],
        handler=create_order(store),
    )


def read_chain(store: MemoryStore) -> Chain:
    return Chain(guards=[entity_exists("Order", store, "orderId")], handler=read_order)


def update_chain(store: MemoryStore) -> Chain:
    return Chain(
        guards=[
            entity_exists("Order", store, "orderId"),
            id_matches_route("Order", "orderId"),
            *(body_data_has("Order", f) for f in REQUIRED_FIELDS),
            dishes_is_valid,
            status_is_valid,
        ],
        handler=update_order,
    )


def destroy_chain(store: MemoryStore) -> Chain:
    return Chain(
        guards=[entity_exists("Order", store, "orderId"), status_is_pending],
        handler=destroy_order(store),
    )


@router.get("")
async def list_route(request: Request) -> JSONResponse:
    store = _store(request)
    return Chain(guards=[], handler=list_orders(store))(RequestContext())


@router.post("")
async def create_route(request: Request) -> JSONResponse:
    store = _store(request)
    ctx = RequestContext(data=await read_data(request))
    with store.lock:
        return create_chain(store)(ctx)


@router.get("/{order_id}")
async def read_route(order_id: str, request: Request) -> JSONResponse:
    store = _store(request)
    ctx = RequestContext(params={"orderId": order_id})
    return read_chain(store)(ctx)


@router.put("/{order_id}")
async def update_route(order_id: str, request: Request) -> JSONResponse:
    store = _store(request)
    ctx = RequestContext(params={"orderId": order_id}, data=await read_data(request))
    with store.lock:
        return update_chain(store)(ctx)


@router.delete("/{order_id}")
async def destroy_route(order_id: str, request: Request) -> Response:
    store = _store(request)
    ctx = RequestContext(params={"orderId": order_id})
    with store.lock:
        return destroy_chain(store)(ctx)
