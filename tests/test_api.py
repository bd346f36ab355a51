import pytest

from src.presentation.rate_limit import limiter
from tests.factories import make_comment, service_token, store_comment


def create_discussion(client, headers, start_number):
    response = client.post("/api/discussions", headers=headers, json={"startNumber": start_number})
    assert response.status_code == 201, response.text
    return response.json()


def create_comment(client, headers, discussion_id, operation, operand, parent_id=None):
    payload = {"discussionId": discussion_id, "operation": operation, "operand": operand}
    if parent_id is not None:
        payload["parentId"] = parent_id
    return client.post("/api/comments", headers=headers, json=payload)


# ==================== AUTH ====================


def test_register_returns_token_and_user(register):
    body = register("alice")
    assert body["user"] == {"id": 1, "username": "alice"}
    assert body["token"]


def test_register_duplicate_username(client, register):
    register("alice")
    response = client.post("/api/auth/register", json={"username": "alice", "password": "another-pass"})
    assert response.status_code == 409
    assert response.json() == {"error": "Username already exists"}


def test_register_requires_fields(client):
    response = client.post("/api/auth/register", json={"username": "alice"})
    assert response.status_code == 400
    assert response.json()["error"] == "Validation error"


def test_login(client, register):
    register("alice", "secret-pass")

    response = client.post("/api/auth/login", json={"username": "alice", "password": "secret-pass"})
    assert response.status_code == 200
    assert response.json()["user"] == {"id": 1, "username": "alice"}

    response = client.post("/api/auth/login", json={"username": "alice", "password": "nope-nope"})
    assert response.status_code == 401
    assert response.json() == {"error": "Invalid credentials"}


def test_login_token_authorizes_writes(client, register):
    register("alice", "secret-pass")
    token = client.post(
        "/api/auth/login", json={"username": "alice", "password": "secret-pass"}
    ).json()["token"]

    discussion = create_discussion(client, {"Authorization": f"Bearer {token}"}, 7)
    assert discussion["username"] == "alice"


def test_writes_require_token(client):
    response = client.post("/api/discussions", json={"startNumber": 1})
    assert response.status_code == 401
    assert response.json() == {"error": "Access token required"}

    response = client.post(
        "/api/comments", json={"discussionId": 1, "operation": "ADD", "operand": 1}
    )
    assert response.status_code == 401


def test_invalid_and_expired_tokens(client, register):
    register("alice")
    bad = {"Authorization": f"Bearer {service_token(secret='wrong-secret')}"}
    expired = {"Authorization": f"Bearer {service_token(ttl=-60)}"}

    assert client.post("/api/discussions", headers=bad, json={"startNumber": 1}).status_code == 401
    response = client.post("/api/discussions", headers=expired, json={"startNumber": 1})
    assert response.status_code == 401
    assert response.json() == {"error": "Token has expired"}


def test_token_for_deleted_user_is_rejected(client):
    headers = {"Authorization": f"Bearer {service_token(user_id=42, username='ghost')}"}
    response = client.post("/api/discussions", headers=headers, json={"startNumber": 1})
    assert response.status_code == 401
    assert response.json() == {"error": "User not found"}


def test_auth_rate_limit(app, client):
    limiter.reset()
    limiter.enabled = True
    try:
        codes = [
            client.post("/api/auth/login", json={"username": "alice", "password": "x" * 8}).status_code
            for _ in range(25)
        ]
    finally:
        limiter.enabled = False
        limiter.reset()

    assert 429 in codes


# ==================== DISCUSSIONS ====================


def test_create_discussion(client, auth_headers):
    body = create_discussion(client, auth_headers, 10)

    assert body["id"] == 1
    assert body["userId"] == 1
    assert body["username"] == "alice"
    assert body["startNumber"] == 10
    assert body["comments"] == []
    assert "createdAt" in body


def test_create_discussion_requires_number(client, auth_headers):
    response = client.post("/api/discussions", headers=auth_headers, json={"startNumber": "ten"})
    assert response.status_code == 400

    response = client.post("/api/discussions", headers=auth_headers, json={})
    assert response.status_code == 400


@pytest.mark.parametrize("start_number", [True, "10", None])
def test_create_discussion_rejects_non_numeric_seed(client, auth_headers, start_number):
    response = client.post(
        "/api/discussions", headers=auth_headers, json={"startNumber": start_number}
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Validation error"
    assert client.get("/api/health").json()["counts"]["discussions"] == 0


def test_create_discussion_accepts_fractional_seed(client, auth_headers):
    assert create_discussion(client, auth_headers, 2.5)["startNumber"] == 2.5


def test_list_discussions_empty(client):
    response = client.get("/api/discussions")
    assert response.status_code == 200
    assert response.json() == []


def test_list_discussions_newest_first(client, auth_headers):
    create_discussion(client, auth_headers, 1)
    create_discussion(client, auth_headers, 2)
    create_discussion(client, auth_headers, 3)

    body = client.get("/api/discussions").json()

    assert [d["id"] for d in body] == [3, 2, 1]
    assert [d["startNumber"] for d in body] == [3, 2, 1]


def test_get_discussion(client, auth_headers):
    discussion = create_discussion(client, auth_headers, 4)
    create_comment(client, auth_headers, discussion["id"], "DIVIDE", 8)

    response = client.get(f"/api/discussions/{discussion['id']}")
    assert response.status_code == 200
    assert response.json()["comments"][0]["result"] == 0.5

    assert client.get("/api/discussions/99").status_code == 404
    assert client.get("/api/discussions/0").status_code == 400


# ==================== COMMENTS ====================


def test_create_comment(client, auth_headers):
    discussion = create_discussion(client, auth_headers, 10)

    response = create_comment(client, auth_headers, discussion["id"], "ADD", 5)

    assert response.status_code == 201
    body = response.json()
    assert body["id"] == 1
    assert body["discussionId"] == discussion["id"]
    assert body["parentId"] is None
    assert body["username"] == "alice"
    assert body["operation"] == "ADD"
    assert body["operand"] == 5
    assert body["result"] == 15


def test_create_comment_errors(client, auth_headers):
    discussion = create_discussion(client, auth_headers, 10)

    response = create_comment(client, auth_headers, discussion["id"], "MOD", 5)
    assert response.status_code == 400
    assert "Invalid operation" in response.json()["error"]

    response = create_comment(client, auth_headers, discussion["id"], "DIVIDE", 0)
    assert response.status_code == 400
    assert response.json() == {"error": "Division by zero"}

    response = create_comment(client, auth_headers, 99, "ADD", 1)
    assert response.status_code == 404

    response = create_comment(client, auth_headers, discussion["id"], "ADD", 1, parent_id=12)
    assert response.status_code == 404

    response = create_comment(client, auth_headers, discussion["id"], "ADD", "five")
    assert response.status_code == 400

    assert client.get("/api/health").json()["counts"]["comments"] == 0


@pytest.mark.parametrize("operand", [True, False, "5", None])
def test_create_comment_rejects_non_numeric_operand(client, auth_headers, operand):
    discussion = create_discussion(client, auth_headers, 10)

    response = create_comment(client, auth_headers, discussion["id"], "ADD", operand)

    assert response.status_code == 400
    assert response.json()["error"] == "Validation error"
    assert client.get("/api/health").json()["counts"]["comments"] == 0


def test_create_comment_rejects_string_ids(client, auth_headers):
    discussion = create_discussion(client, auth_headers, 10)

    response = create_comment(client, auth_headers, str(discussion["id"]), "ADD", 1)

    assert response.status_code == 400


def test_reply_in_another_discussion_is_rejected(client, auth_headers):
    first = create_discussion(client, auth_headers, 1)
    second = create_discussion(client, auth_headers, 2)
    parent = create_comment(client, auth_headers, first["id"], "ADD", 1).json()

    response = create_comment(client, auth_headers, second["id"], "ADD", 1, parent_id=parent["id"])

    assert response.status_code == 404


def test_end_to_end_tree(client, auth_headers, register):
    discussion = create_discussion(client, auth_headers, 10)
    c1 = create_comment(client, auth_headers, discussion["id"], "ADD", 5).json()
    bob = {"Authorization": f"Bearer {register('bob')['token']}"}
    c2 = create_comment(client, bob, discussion["id"], "MULTIPLY", 3, parent_id=c1["id"]).json()
    c3 = create_comment(client, auth_headers, discussion["id"], "SUBTRACT", 2).json()

    assert (c1["result"], c2["result"], c3["result"]) == (15, 45, 8)

    [body] = client.get("/api/discussions").json()
    comments = body["comments"]

    assert [(c["id"], c["result"]) for c in comments] == [(c1["id"], 15), (c3["id"], 8)]
    [child] = comments[0]["children"]
    assert (child["id"], child["result"], child["children"]) == (c2["id"], 45, [])
    assert child["username"] == "bob"
    assert child["parentId"] == c1["id"]
    assert comments[1]["children"] == []


def test_sibling_order_is_creation_order(client, auth_headers):
    discussion = create_discussion(client, auth_headers, 2)
    a = create_comment(client, auth_headers, discussion["id"], "ADD", 1).json()
    b = create_comment(client, auth_headers, discussion["id"], "ADD", 2, parent_id=a["id"]).json()
    c = create_comment(client, auth_headers, discussion["id"], "ADD", 3, parent_id=a["id"]).json()

    tree = client.get(f"/api/discussions/{discussion['id']}").json()["comments"]

    assert [child["id"] for child in tree[0]["children"]] == [b["id"], c["id"]]


def test_chain_integrity(client, auth_headers):
    discussion = create_discussion(client, auth_headers, 100)
    a = create_comment(client, auth_headers, discussion["id"], "SUBTRACT", 20).json()
    b = create_comment(client, auth_headers, discussion["id"], "MULTIPLY", 2, parent_id=a["id"]).json()

    assert a["result"] == 80
    assert b["result"] == 160


def test_dangling_parent_is_shown_as_root(client, auth_headers, store):
    discussion = create_discussion(client, auth_headers, 10)
    create_comment(client, auth_headers, discussion["id"], "ADD", 1)
    store_comment(
        store, make_comment(20, parent_id=404, discussion_id=discussion["id"], seconds=3600)
    )

    response = client.get("/api/discussions")

    assert response.status_code == 200
    assert [c["id"] for c in response.json()[0]["comments"]] == [1, 20]


def test_malformed_comment_does_not_break_listing(client, auth_headers, store):
    discussion = create_discussion(client, auth_headers, 10)
    create_comment(client, auth_headers, discussion["id"], "ADD", 1)
    store_comment(
        store, make_comment(30, discussion_id=discussion["id"], operation="MOD", seconds=3600)
    )

    response = client.get("/api/discussions")

    assert response.status_code == 200
    assert [c["id"] for c in response.json()[0]["comments"]] == [1]
    assert client.get(f"/api/discussions/{discussion['id']}").status_code == 200
    assert 'kind="malformed_record"' in client.get("/metrics").text


# ==================== HEALTH / METRICS ====================


def test_health_counts(client, auth_headers):
    discussion = create_discussion(client, auth_headers, 1)
    create_comment(client, auth_headers, discussion["id"], "ADD", 1)

    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {
        "status": "ok",
        "counts": {"users": 1, "discussions": 1, "comments": 1},
    }


def test_metrics_endpoint(client, auth_headers):
    discussion = create_discussion(client, auth_headers, 1)
    create_comment(client, auth_headers, discussion["id"], "MULTIPLY", 2)

    response = client.get("/metrics")

    assert response.status_code == 200
    assert "discussion_comments_created_total" in response.text
    assert "http_server_request_duration_seconds" in response.text


def test_correlation_id_is_echoed(client):
    response = client.get("/", headers={"X-Correlation-ID": "abc-123"})
    assert response.headers["X-Correlation-ID"] == "abc-123"
