def test_submit_and_list_orders(client):
    client.post("/shipping", json={"email": "a@x.com", "address": "1 Main St", "totalAmount": 20})
    client.post("/shipping", json={"email": "b@x.com", "address": "2 Side St", "totalAmount": 5})
    client.post("/shipping", json={"email": "a@x.com", "address": "1 Main St", "totalAmount": 7})

    all_orders = client.get("/order").json()
    ann_orders = client.get("/order/a@x.com").json()

    assert len(all_orders) == 3
    assert [o["totalAmount"] for o in ann_orders] == [20, 7]
    assert all(o["email"] == "a@x.com" for o in ann_orders)


def test_duplicate_submissions_are_both_stored(client):
    shipment = {"email": "a@x.com", "address": "1 Main St"}

    first = client.post("/shipping", json=shipment).json()
    second = client.post("/shipping", json=shipment).json()

    assert first["insertedId"] != second["insertedId"]
    assert len(client.get("/order/a@x.com").json()) == 2


def test_orders_for_unknown_email_are_empty(client):
    assert client.get("/order/nobody@x.com").json() == []


def test_null_fields_are_stored_as_sent(client):
    client.post("/shipping", json={"email": "a@x.com", "coupon": None, "note": None})

    order = client.get("/order/a@x.com").json()[0]

    assert order["coupon"] is None
    assert order["note"] is None
