"""Tests for variant create + fetch.

Both through the service functions and over HTTP.
"""
import uuid
import pytest
from ab_tester.errors import NotFoundError
from ab_tester.models import Variant
from ab_tester.schemas import VariantCreate
from ab_tester.services.variant_service import create_variant, get_variant_by_id


def test_create_variant(db):
    """Test creating a variant returns a generated id and the same fields"""
    variant = create_variant(db, VariantCreate(name="control", percent=50))

    assert variant.id is not None
    assert variant.name == "control"
    assert variant.description is None
    assert variant.percent == 50

    # Verify it's in the database
    db_variant = db.query(Variant).filter(Variant.id == variant.id).first()
    assert db_variant is not None


def test_create_variant_ids_are_unique(db):
    ids = {create_variant(db, VariantCreate(name=f"arm_{i}", percent=10)).id for i in range(5)}
    assert len(ids) == 5


def test_percent_is_not_range_checked(db):
    """No 0-100 check and no sum check across variants"""
    a = create_variant(db, VariantCreate(name="a", percent=150))
    b = create_variant(db, VariantCreate(name="b", percent=-20))

    assert a.percent == 150
    assert b.percent == -20


def test_get_variant_not_found(db):
    with pytest.raises(NotFoundError):
        get_variant_by_id(db, str(uuid.uuid4()))


def test_get_variant_with_garbage_id(db):
    """A non-uuid id can't match anything, so it is a not-found too"""
    with pytest.raises(NotFoundError):
        get_variant_by_id(db, "not-a-uuid")


def test_post_variant_endpoint(client):
    response = client.post("/api/variant", json={"name": "control", "percent": 50})

    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "control"
    assert body["description"] is None
    assert body["percent"] == 50
    assert uuid.UUID(body["id"])


def test_get_variant_matches_create_response(client):
    created = client.post(
        "/api/variant",
        json={"name": "treatment", "description": "New checkout", "percent": 25}
    ).json()

    response = client.get(f"/api/variant/{created['id']}")

    assert response.status_code == 200
    assert response.json() == created


def test_get_unknown_variant_returns_404(client):
    response = client.get(f"/api/variant/{uuid.uuid4()}")

    assert response.status_code == 404
    assert response.json() == {"detail": "Variant not found"}

    # still serving after the miss
    assert client.post("/api/variant", json={"name": "x", "percent": 1}).status_code == 201


def test_post_variant_missing_name(client, db):
    response = client.post("/api/variant", json={"percent": 50})

    assert response.status_code == 400
    assert any(e["field"] == "body.name" for e in response.json()["errors"])
    assert db.query(Variant).count() == 0


def test_post_variant_non_integer_percent(client):
    response = client.post("/api/variant", json={"name": "control", "percent": "half"})

    assert response.status_code == 400


def test_post_variant_malformed_json(client, db):
    """Broken body is rejected before anything hits the database"""
    response = client.post(
        "/api/variant",
        content="{name: control",
        headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid request body"
    assert db.query(Variant).count() == 0


@pytest.mark.parametrize("percent", [2**31, 2**40, 2**64, -2**31 - 1])
def test_post_variant_percent_outside_int_column(client, db, percent):
    """Values the INT column can't hold are a bad request on every backend"""
    response = client.post("/api/variant", json={"name": "big", "percent": percent})

    assert response.status_code == 400
    assert any(e["field"] == "body.percent" for e in response.json()["errors"])
    assert db.query(Variant).count() == 0


def test_post_variant_percent_at_int_limits(client):
    for percent in (2**31 - 1, -2**31):
        response = client.post("/api/variant", json={"name": "edge", "percent": percent})
        assert response.status_code == 201
        assert response.json()["percent"] == percent


@pytest.mark.parametrize("percent", [True, "50"])
def test_post_variant_percent_must_be_json_integer(client, db, percent):
    """No coercion: booleans and numeric strings are rejected"""
    response = client.post("/api/variant", json={"name": "control", "percent": percent})

    assert response.status_code == 400
    assert db.query(Variant).count() == 0


def test_post_variant_trailing_slash_redirects(client):
    response = client.post("/api/variant/", json={"name": "control", "percent": 50})

    assert response.history[0].status_code == 307
    assert response.status_code == 201
    assert response.json()["name"] == "control"
