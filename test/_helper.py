"""
Payload builders shared by the API tests.
"""


def dish_payload(**overrides) -> dict:
    data = {
        "name": "Taco",
        "description": "d",
        "price": 5,
        "image_url": "u",
    }
    data.update(overrides)
    return {"data": data}


def order_payload(**overrides) -> dict:
    data = {
        "deliverTo": "A",
        "mobileNumber": "555",
        "dishes": [{"dishId": "1", "quantity": 2}],
    }
    data.update(overrides)
    return {"data": data}


def without(payload: dict, field: str) -> dict:
    data = dict(payload["data"])
    data.pop(field, None)
    return {"data": data}


def create_order(client, **overrides) -> dict:
    resp = client.post("/orders", json=order_payload(**overrides))
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


def create_dish(client, **overrides) -> dict:
    resp = client.post("/dishes", json=dish_payload(**overrides))
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]
