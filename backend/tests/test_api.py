from decimal import Decimal


def _create(client, path, payload):
    response = client.post(f"/api{path}", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def _table(client, empty=True, guests=0):
    return _create(client, "/tables", {"number_of_guests": guests, "empty": empty})


def _menu(client):
    group = _create(client, "/menu-groups", {"name": "Set menus"})
    product = _create(client, "/products", {"name": "Fried chicken", "price": 16000})
    return _create(client, "/menus", {
        "name": "Fried chicken",
        "price": 16000,
        "menu_group_id": group["id"],
        "menu_lines": [{"product_id": product["id"], "quantity": 1}]
    })


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_create_and_list_menus(client):
    menu = _menu(client)

    assert Decimal(menu["price"]) == Decimal("16000")
    assert len(menu["menu_lines"]) == 1
    assert menu["menu_lines"][0]["quantity"] == 1

    listed = client.get("/api/menus").json()
    assert [m["id"] for m in listed] == [menu["id"]]


def test_create_menu_with_unknown_group(client):
    response = client.post("/api/menus", json={
        "name": "Orphan", "price": 1000, "menu_group_id": 77, "menu_lines": []
    })
    assert response.status_code == 404
    assert response.json()["detail"] == "MenuGroup 77 does not exist"


def test_create_menu_with_unknown_product(client):
    group = _create(client, "/menu-groups", {"name": "Set menus"})
    response = client.post("/api/menus", json={
        "name": "Ghost", "price": 1000, "menu_group_id": group["id"],
        "menu_lines": [{"product_id": 5, "quantity": 1}]
    })
    assert response.status_code == 404
    assert response.json()["detail"] == "Product 5 does not exist"


def test_create_product_with_negative_price(client):
    response = client.post("/api/products", json={"name": "Fried chicken", "price": -1})
    assert response.status_code == 400


def test_create_product_without_price(client):
    response = client.post("/api/products", json={"name": "Fried chicken"})
    assert response.status_code == 400


def test_group_and_ungroup_tables(client):
    t1, t2 = _table(client), _table(client)

    group = _create(client, "/table-groups", {"order_table_ids": [t1["id"], t2["id"]]})
    assert group["order_table_ids"] == [t1["id"], t2["id"]]

    tables = client.get("/api/tables").json()
    assert all(t["table_group_id"] == group["id"] and t["empty"] is False for t in tables)

    response = client.delete(f"/api/table-groups/{group['id']}")
    assert response.status_code == 204

    tables = client.get("/api/tables").json()
    assert all(t["table_group_id"] is None and t["empty"] is False for t in tables)


def test_group_rejections_report_the_rule(client):
    t1, t2 = _table(client), _table(client, empty=False)

    too_few = client.post("/api/table-groups", json={"order_table_ids": [t1["id"]]})
    assert too_few.status_code == 400
    assert too_few.json()["detail"] == "too few tables"

    duplicate = client.post("/api/table-groups", json={"order_table_ids": [t1["id"], t1["id"]]})
    assert duplicate.json()["detail"] == "duplicate table"

    seated = client.post("/api/table-groups", json={"order_table_ids": [t1["id"], t2["id"]]})
    assert seated.json()["detail"] == "non-empty table"


def test_group_with_unknown_table(client):
    t1 = _table(client)
    response = client.post("/api/table-groups", json={"order_table_ids": [t1["id"], 404]})
    assert response.status_code == 404
    assert response.json()["detail"] == "OrderTable 404 does not exist"


def test_ungroup_blocked_by_open_order(client):
    t1, t2 = _table(client), _table(client)
    group = _create(client, "/table-groups", {"order_table_ids": [t1["id"], t2["id"]]})
    menu = _menu(client)
    order = _create(client, "/orders", {
        "order_table_id": t1["id"],
        "order_line_items": [{"menu_id": menu["id"], "quantity": 2}]
    })
    assert order["order_status"] == "COOKING"

    blocked = client.delete(f"/api/table-groups/{group['id']}")
    assert blocked.status_code == 400
    assert blocked.json()["detail"] == "orders in progress"

    completed = client.put(f"/api/orders/{order['id']}/order-status", json={"order_status": "completion"})
    assert completed.status_code == 200
    assert completed.json()["order_status"] == "COMPLETION"

    assert client.delete(f"/api/table-groups/{group['id']}").status_code == 204


def test_ungroup_unknown_group(client):
    response = client.delete("/api/table-groups/99")
    assert response.status_code == 404


def test_table_state_changes(client):
    table = _table(client, empty=False)

    guests = client.put(f"/api/tables/{table['id']}/number-of-guests", json={"number_of_guests": 3})
    assert guests.status_code == 200
    assert guests.json()["number_of_guests"] == 3

    emptied = client.put(f"/api/tables/{table['id']}/empty", json={"empty": True})
    assert emptied.status_code == 200
    assert emptied.json()["empty"] is True

    rejected = client.put(f"/api/tables/{table['id']}/number-of-guests", json={"number_of_guests": 2})
    assert rejected.status_code == 400


def test_order_without_line_items(client):
    table = _table(client, empty=False)
    response = client.post("/api/orders", json={"order_table_id": table["id"], "order_line_items": []})
    assert response.status_code == 400


def test_unknown_order_status_is_unprocessable(client):
    table = _table(client, empty=False)
    menu = _menu(client)
    order = _create(client, "/orders", {
        "order_table_id": table["id"],
        "order_line_items": [{"menu_id": menu["id"], "quantity": 1}]
    })
    response = client.put(f"/api/orders/{order['id']}/order-status", json={"order_status": "EATEN"})
    assert response.status_code == 422


def test_menu_line_quantity_beyond_bigint_is_rejected(client):
    group = _create(client, "/menu-groups", {"name": "Set menus"})
    product = _create(client, "/products", {"name": "Fried chicken", "price": 16000})
    response = client.post("/api/menus", json={
        "name": "Bottomless", "price": 16000, "menu_group_id": group["id"],
        "menu_lines": [{"product_id": product["id"], "quantity": 2 ** 63}]
    })
    assert response.status_code == 400
    assert client.get("/api/menus").json() == []


def test_order_quantity_beyond_bigint_is_rejected(client):
    table = _table(client, empty=False)
    menu = _menu(client)
    response = client.post("/api/orders", json={
        "order_table_id": table["id"],
        "order_line_items": [{"menu_id": menu["id"], "quantity": 2 ** 63}]
    })
    assert response.status_code == 400
    assert client.get("/api/orders").json() == []


def test_guest_count_beyond_integer_column_is_rejected(client):
    created = client.post("/api/tables", json={"number_of_guests": 2 ** 31, "empty": False})
    assert created.status_code == 400

    table = _table(client, empty=False)
    changed = client.put(f"/api/tables/{table['id']}/number-of-guests", json={"number_of_guests": 2 ** 31})
    assert changed.status_code == 400
