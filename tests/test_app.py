# tests/test_app.py

def test_root_greeting(client):
    res = client.get("/")
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/plain")
    assert res.text == "Hola mundo desde FastAPI!"


def test_health_check(client):
    res = client.get("/health")
    assert res.json() == {"status": "ok"}


def test_products_are_static(client):
    res = client.get("/api/productos")
    assert res.status_code == 200
    assert res.json() == ["mouse", "teclado", "bocinas"]


def test_products_with_trailing_slash(client):
    assert client.get("/api/productos/").json() == ["mouse", "teclado", "bocinas"]


def test_static_files_are_served_from_public(client):
    res = client.get("/index.html")
    assert res.status_code == 200
    assert "Usuarios API" in res.text


def test_unknown_static_file_is_404(client):
    assert client.get("/nope.txt").status_code == 404
