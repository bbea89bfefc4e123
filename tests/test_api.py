import pytest

from passwright.web.api import app


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c

def test_home(client):
    assert client.get("/").status_code == 200

def test_generate(client):
    resp = client.post("/generate", json={"length": 18, "special": False})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["length"] == 18
    assert len(body["password"]) == 18

def test_generate_bad_config(client):
    assert client.post("/generate", json={"length": 4}).status_code == 400
    assert client.post("/generate", json={"length": "long"}).status_code == 400
    resp = client.post("/generate", json={"upper": False, "lower": False, "digits": False, "special": False})
    assert resp.status_code == 400
    assert "error" in resp.get_json()

def test_validate(client):
    body = client.post("/validate", json={"password": "password"}).get_json()
    assert body["verdict"] == "COMMON"
    assert body["label"] == "Common"
    body = client.post("/validate", json={"password": "password", "check_common": False}).get_json()
    assert body["verdict"] == "VERY_WEAK"

def test_validate_rejects_non_string(client):
    assert client.post("/validate", json={"password": 123}).status_code == 400

def test_boolean_options_must_be_booleans(client):
    resp = client.post("/generate", json={"length": 16, "special": "false"})
    assert resp.status_code == 400
    assert client.post("/validate", json={"password": "password", "check_common": "false"}).status_code == 400
    assert client.post("/validate", json={"password": "password", "check_common": 0}).status_code == 400
