def test_list_and_detail(client, marketplace):
    caterer = marketplace["caterer"]

    listed = client.get("/api/caterers")
    assert listed.status_code == 200
    assert [c["id"] for c in listed.json()] == [caterer["id"]]

    detail = client.get(f"/api/caterers/{caterer['id']}")
    assert detail.status_code == 200
    body = detail.json()
    assert body["caterer"]["business_name"] == "Tasty Caterers"
    assert [m["id"] for m in body["menus"]] == [marketplace["menu"]["id"]]
    assert body["reviews"] == []


def test_detail_is_stable_between_reads(client, marketplace):
    url = f"/api/caterers/{marketplace['caterer']['id']}"

    assert client.get(url).content == client.get(url).content


def test_detail_unknown_caterer(client):
    resp = client.get("/api/caterers/999")

    assert resp.status_code == 404
    assert resp.json()["detail"] == "Caterer not found"


def test_search_by_location_and_event_type(client, api):
    api.register_caterer("north", city="Delhi", state="Delhi", event_types=["pooja"])
    api.register_caterer("south", city="Chennai", state="Tamil Nadu", event_types=["wedding"])
    api.register_caterer("anyday", city="Pune", state="Maharashtra", event_types=[])

    by_city = client.get("/api/caterers/search", params={"location": "chen"}).json()
    assert [c["business_name"] for c in by_city] == ["South Caterers"]

    by_event = client.get("/api/caterers/search", params={"eventType": "pooja"}).json()
    assert [c["business_name"] for c in by_event] == ["North Caterers", "Anyday Caterers"]

    by_wedding = client.get("/api/caterers/search", params={"eventType": "wedding"}).json()
    assert [c["business_name"] for c in by_wedding] == ["South Caterers", "Anyday Caterers"]

    both = client.get("/api/caterers/search", params={"location": "delhi", "eventType": "wedding"}).json()
    assert both == []

    everyone = client.get("/api/caterers/search").json()
    assert len(everyone) == 3


def test_menus_and_reviews_listing(client, marketplace):
    caterer_id = marketplace["caterer"]["id"]

    menus = client.get(f"/api/caterers/{caterer_id}/menus")
    assert menus.status_code == 200
    assert menus.json()[0]["items"] == ["rice", "sambar", "payasam"]

    reviews = client.get(f"/api/caterers/{caterer_id}/reviews")
    assert reviews.status_code == 200
    assert reviews.json() == []


def test_create_menu_requires_caterer(client, marketplace):
    payload = {"name": "x", "meal_type": "lunch", "price_per_plate": 10, "items": ["a"]}

    resp = client.post("/api/caterers/menus", json=payload, headers=marketplace["user_headers"])
    assert resp.status_code == 403

    client.cookies.clear()
    resp = client.post("/api/caterers/menus", json=payload)
    assert resp.status_code == 401


def test_create_menu_requires_items(client, marketplace):
    payload = {"name": "Empty", "meal_type": "dinner", "price_per_plate": 10, "items": []}

    resp = client.post("/api/caterers/menus", json=payload, headers=marketplace["caterer_headers"])

    assert resp.status_code == 422


def test_create_menu_uses_session_caterer(client, api, marketplace):
    other_headers, other = api.register_caterer("rival")

    menu = api.create_menu(other_headers, caterer_id=marketplace["caterer"]["id"])

    assert menu["caterer_id"] == other["id"]


def test_update_menu(client, marketplace):
    menu_id = marketplace["menu"]["id"]

    resp = client.put(
        f"/api/caterers/menus/{menu_id}",
        json={"price_per_plate": 150, "is_special": True},
        headers=marketplace["caterer_headers"],
    )

    assert resp.status_code == 200
    assert resp.json()["price_per_plate"] == 150
    assert resp.json()["is_special"] is True
    assert resp.json()["name"] == "Wedding Feast"


def test_other_caterer_cannot_touch_menu(client, api, marketplace):
    rival_headers, _ = api.register_caterer("rival")
    menu_id = marketplace["menu"]["id"]

    update = client.put(f"/api/caterers/menus/{menu_id}", json={"name": "Mine"}, headers=rival_headers)
    assert update.status_code == 403

    delete = client.delete(f"/api/caterers/menus/{menu_id}", headers=rival_headers)
    assert delete.status_code == 403

    assert client.get(f"/api/caterers/{marketplace['caterer']['id']}/menus").json()[0]["name"] == "Wedding Feast"


def test_update_unknown_menu(client, marketplace):
    resp = client.put("/api/caterers/menus/999", json={"name": "x"}, headers=marketplace["caterer_headers"])

    assert resp.status_code == 404


def test_delete_menu_hides_it(client, api, marketplace):
    caterer_id = marketplace["caterer"]["id"]
    menu_id = marketplace["menu"]["id"]

    resp = client.delete(f"/api/caterers/menus/{menu_id}", headers=marketplace["caterer_headers"])
    assert resp.status_code == 200

    assert client.get(f"/api/caterers/{caterer_id}/menus").json() == []

    order = client.post(
        "/api/orders",
        json=api.order_payload(caterer_id, menu_id),
        headers=marketplace["user_headers"],
    )
    assert order.status_code == 404


def test_update_profile(client, marketplace):
    resp = client.put(
        "/api/caterers/profile",
        json={"business_name": "Tasty Co", "max_plate": 1000, "rating": 5, "review_count": 99},
        headers=marketplace["caterer_headers"],
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["business_name"] == "Tasty Co"
    assert body["max_plate"] == 1000
    assert body["rating"] == 0
    assert body["review_count"] == 0


def test_update_profile_rejects_inverted_plate_range(client, marketplace):
    resp = client.put(
        "/api/caterers/profile",
        json={"min_plate": 600},
        headers=marketplace["caterer_headers"],
    )

    assert resp.status_code == 400
    assert "min_plate" in resp.json()["detail"]


def test_update_profile_requires_caterer(client, marketplace):
    resp = client.put("/api/caterers/profile", json={"city": "Mysore"}, headers=marketplace["user_headers"])

    assert resp.status_code == 403


def test_caterer_orders_listing(client, api, marketplace):
    order = api.place_order(
        marketplace["user_headers"], marketplace["caterer"]["id"], marketplace["menu"]["id"]
    )

    resp = client.get("/api/caterers/orders", headers=marketplace["caterer_headers"])

    assert resp.status_code == 200
    assert [o["id"] for o in resp.json()] == [order["id"]]
    assert client.get("/api/caterers/orders", headers=marketplace["user_headers"]).status_code == 403
