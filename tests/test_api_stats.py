"""Tests end-to-end de la route /api/stats."""

from datetime import date, timedelta


def _previous_month_day() -> str:
    return (date.today().replace(day=1) - timedelta(days=1)).isoformat()


def test_stats_without_commandes(auth_client):
    response = auth_client.get("/api/stats")

    assert response.status_code == 200
    stats = response.json()
    assert stats["totalCommandes"] == 0
    assert stats["totalQuantite"] == 0
    assert stats["quantiteParProduit"] == {}
    assert stats["meilleurClient"] == "N/A"
    assert stats["moinsClient"] == "N/A"
    assert stats["meilleurTransporteur"] == "N/A"
    assert stats["depotPlusActif"] == "N/A"


def test_stats_summarise_the_current_month(auth_client, commande_payload):
    payloads = [
        commande_payload(client="A", quantite=1000, statut="Livré", transporteur="T1"),
        commande_payload(client="A", quantite=2000.4, produit="Essence", transporteur="T2"),
        commande_payload(client="B", quantite=500, statut="Livré", transporteur="T1", depot="Yopougon"),
        commande_payload(
            client="C",
            quantite=9999,
            dateChargement=_previous_month_day(),
            dateLivraison=_previous_month_day(),
        ),
    ]
    for payload in payloads:
        assert auth_client.post("/api/commandes", json=payload).status_code == 201

    stats = auth_client.get("/api/stats").json()

    assert stats["totalCommandes"] == 3
    assert stats["totalQuantite"] == 3500
    assert stats["quantiteParProduit"] == {"Gazoil": 1500, "Essence": 2000.4}
    assert (stats["meilleurClient"], stats["meilleurClientCommandes"]) == ("A", 2)
    assert (stats["moinsClient"], stats["moinsClientCommandes"]) == ("B", 1)
    assert (stats["meilleurTransporteur"], stats["meilleurTransporteurLivraisons"]) == ("T1", 2)
    assert (stats["depotPlusActif"], stats["depotPlusActifQuantite"]) == ("Dépôt de Vridi", 3000)


def test_stats_require_a_session(client):
    response = client.get("/api/stats")

    assert response.status_code == 401
    assert response.json() == {"message": "Not authenticated"}
