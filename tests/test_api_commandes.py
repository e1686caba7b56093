"""Tests end-to-end des routes /api/commandes."""

import pytest

from application.services.commande_service import CommandeService


def _create(client, payload):
    response = client.post("/api/commandes", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_returns_input_plus_identity(auth_client, commande_payload):
    payload = commande_payload()

    created = _create(auth_client, payload)

    assert created["id"]
    assert created["createdAt"]
    for key, value in payload.items():
        assert created[key] == value


def test_crud_flow(auth_client, commande_payload):
    created = _create(auth_client, commande_payload(client="Total Energies"))
    url = f"/api/commandes/{created['id']}"

    fetched = auth_client.get(url)
    assert fetched.status_code == 200
    assert fetched.json() == created

    replacement = commande_payload(
        client="Vivo Energy",
        quantite=8000,
        produit="Jet A1",
        statut="Livré",
        destination="Korhogo",
    )
    updated = auth_client.put(url, json=replacement)
    assert updated.status_code == 200
    body = updated.json()
    assert body["id"] == created["id"]
    assert body["createdAt"] == created["createdAt"]
    for key, value in replacement.items():
        assert body[key] == value

    listed = auth_client.get("/api/commandes").json()
    assert [c["id"] for c in listed] == [created["id"]]

    assert auth_client.delete(url).json() == {"success": True}
    assert auth_client.get(url).status_code == 404
    second_delete = auth_client.delete(url)
    assert second_delete.status_code == 404
    assert second_delete.json() == {"message": "Commande not found"}


def test_list_is_most_recent_first(auth_client, commande_payload):
    ids = [_create(auth_client, commande_payload(numeroBonCommande=f"BC-{i}"))["id"] for i in range(3)]

    listed = auth_client.get("/api/commandes").json()

    assert {c["id"] for c in listed} == set(ids)
    created_dates = [c["createdAt"] for c in listed]
    assert created_dates == sorted(created_dates, reverse=True)


def test_get_unknown_commande_is_404(auth_client):
    response = auth_client.get("/api/commandes/inexistante")

    assert response.status_code == 404
    assert response.json() == {"message": "Commande not found"}


def test_update_unknown_commande_is_404_and_creates_nothing(auth_client, commande_payload):
    response = auth_client.put("/api/commandes/inexistante", json=commande_payload())

    assert response.status_code == 404
    assert auth_client.get("/api/commandes").json() == []


def test_update_requires_the_complete_record(auth_client, commande_payload):
    created = _create(auth_client, commande_payload())
    partial = commande_payload()
    del partial["destination"]

    response = auth_client.put(f"/api/commandes/{created['id']}", json=partial)

    assert response.status_code == 400
    assert "La destination est requise" in response.json()["message"]
    assert auth_client.get(f"/api/commandes/{created['id']}").json() == created


def test_invalid_create_reports_every_field(auth_client, commande_payload):
    response = auth_client.post("/api/commandes", json=commande_payload(client="", quantite=-5))

    assert response.status_code == 400
    message = response.json()["message"]
    assert message.startswith("Validation error: ")
    assert "Le client est requis" in message
    assert "La quantité doit être positive" in message
    assert auth_client.get("/api/commandes").json() == []


def test_numeric_strings_are_coerced(auth_client, commande_payload):
    created = _create(auth_client, commande_payload(quantite="12000.5", tauxTransport="15"))

    assert created["quantite"] == 12000.5
    assert created["tauxTransport"] == 15


@pytest.mark.parametrize("produit, expected_status", [
    ("Diesel", 400),
    ("gazoil", 400),
    ("Jet A1", 201),
    ("Essence", 201),
])
def test_product_must_be_one_of_the_enumeration(auth_client, commande_payload, produit, expected_status):
    response = auth_client.post("/api/commandes", json=commande_payload(produit=produit))

    assert response.status_code == expected_status


def test_body_must_be_an_object(auth_client):
    response = auth_client.post("/api/commandes", json=["pas", "un", "objet"])

    assert response.status_code == 400
    assert response.json()["message"].startswith("Validation error")


def test_unexpected_failure_is_a_generic_500(auth_client, monkeypatch):
    def explode(self):
        raise RuntimeError("connection refused on 10.0.0.4")

    monkeypatch.setattr(CommandeService, "list_commandes", explode)

    response = auth_client.get("/api/commandes")

    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}
    assert "10.0.0.4" not in response.text
