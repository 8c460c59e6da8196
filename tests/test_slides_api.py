def test_slide_crud(client, admin_headers):
    payload = {"message": "Promoções exclusivas", "image": "https://picsum.photos/seed/stream1/1200/600"}
    created = client.post("/api/slides", json=payload, headers=admin_headers)
    assert created.status_code == 201
    slide = created.json()
    assert client.get(f"/api/slides/{slide['id']}").json() == dict(payload, id=slide["id"])

    updated = client.put(
        f"/api/slides/{slide['id']}", json={"message": "Melhor loja de streamings"}, headers=admin_headers
    ).json()
    assert updated == {"id": slide["id"], "message": "Melhor loja de streamings", "image": payload["image"]}
    assert client.get("/api/slides").json() == [updated]

    deleted = client.delete(f"/api/slides/{slide['id']}", headers=admin_headers)
    assert deleted.json() == {"success": True}
    assert client.get("/api/slides").json() == []


def test_slide_requires_message_and_image(client, admin_headers):
    assert client.post(
        "/api/slides", json={"message": " ", "image": "https://x.io/a.jpg"}, headers=admin_headers
    ).status_code == 422
    assert client.post(
        "/api/slides", json={"message": "Hi", "image": ""}, headers=admin_headers
    ).status_code == 422
    assert client.post("/api/slides", json={"message": "Hi"}, headers=admin_headers).status_code == 422


def test_missing_slide(client, admin_headers):
    assert client.get("/api/slides/3").status_code == 404
    assert client.put("/api/slides/3", json={"message": "x"}, headers=admin_headers).status_code == 404
    assert client.delete("/api/slides/3", headers=admin_headers).status_code == 404


def test_slide_mutations_require_admin(client):
    assert client.post("/api/slides", json={"message": "Hi", "image": "/a.jpg"}).status_code == 401
