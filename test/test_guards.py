from grubdash.chain import RequestContext
from grubdash.errors import InvalidInput, NotFound
from grubdash.guards import body_data_has, entity_exists, id_matches_route
from grubdash.store import MemoryStore


def test_body_data_has_passes_for_truthy_field():
    guard = body_data_has("Dish", "name")
    assert guard(RequestContext(data={"name": "Taco"})) is None


def test_body_data_has_rejects_missing_and_falsy_fields():
    guard = body_data_has("Order", "deliverTo")
    for data in ({}, {"deliverTo": ""}, {"deliverTo": None}, {"deliverTo": 0}):
        error = guard(RequestContext(data=data))
        assert isinstance(error, InvalidInput)
        assert error.message == "Order must include a deliverTo"


def test_entity_exists_stores_record_in_context():
    store = MemoryStore([{"id": "abc", "name": "Taco"}])
    ctx = RequestContext(params={"dishId": "abc"})

    assert entity_exists("Dish", store, "dishId")(ctx) is None
    assert ctx.locals["dish"] is store.find("abc")


def test_entity_exists_matches_numeric_ids_loosely():
    store = MemoryStore([{"id": 7, "deliverTo": "A"}])
    ctx = RequestContext(params={"orderId": "7"})

    assert entity_exists("Order", store, "orderId")(ctx) is None
    assert ctx.locals["order"]["id"] == 7


def test_entity_exists_not_found_names_the_id():
    ctx = RequestContext(params={"dishId": "999"})
    error = entity_exists("Dish", MemoryStore(), "dishId")(ctx)

    assert isinstance(error, NotFound)
    assert error.status_code == 404
    assert error.message == "Dish ID not found: 999"
    assert "dish" not in ctx.locals


def test_id_match_allows_absent_or_equal_body_id():
    guard = id_matches_route("Dish", "dishId")
    assert guard(RequestContext(params={"dishId": "a1"}, data={})) is None
    assert guard(RequestContext(params={"dishId": "a1"}, data={"id": ""})) is None
    assert guard(RequestContext(params={"dishId": "a1"}, data={"id": "a1"})) is None


def test_id_match_is_strict():
    guard = id_matches_route("Order", "orderId")

    error = guard(RequestContext(params={"orderId": "7"}, data={"id": 7}))

    assert isinstance(error, InvalidInput)
    assert error.message == "Order id does not match route id. Order: 7, Route: 7"


def test_id_match_names_both_ids():
    error = id_matches_route("Dish", "dishId")(
        RequestContext(params={"dishId": "a1"}, data={"id": "b2"})
    )
    assert "b2" in error.message
    assert "a1" in error.message


def test_body_data_has_treats_empty_collections_as_present():
    guard = body_data_has("Order", "dishes")
    assert guard(RequestContext(data={"dishes": []})) is None
    assert guard(RequestContext(data={"dishes": {}})) is None
