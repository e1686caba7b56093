"""Tests unitaires des statistiques mensuelles."""

from datetime import date, datetime

from application.services.stats_service import (
    StatsService,
    compute_monthly_stats,
    month_bounds,
    round_half_up,
)
from domain.entities import Produit, Statut
from factories import build_commande

NOW = datetime(2026, 10, 19, 14, 30)
THIS_MONTH = date(2026, 10, 10)
LAST_MONTH = date(2026, 9, 30)


def test_best_and_worst_client_by_order_count():
    commandes = [
        build_commande(client="A", date_chargement=THIS_MONTH),
        build_commande(client="A", date_chargement=THIS_MONTH),
        build_commande(client="B", date_chargement=THIS_MONTH),
    ]

    stats = compute_monthly_stats(commandes, NOW)

    assert stats["meilleurClient"] == "A"
    assert stats["meilleurClientCommandes"] == 2
    assert stats["moinsClient"] == "B"
    assert stats["moinsClientCommandes"] == 1


def test_previous_month_orders_are_excluded_from_every_aggregate():
    commandes = [
        build_commande(client="A", date_chargement=THIS_MONTH, quantite=100, statut=Statut.LIVRE),
        build_commande(client="Z", date_chargement=LAST_MONTH, quantite=9999,
                       statut=Statut.LIVRE, transporteur="Ancien", depot="Vieux dépôt"),
    ]

    stats = compute_monthly_stats(commandes, NOW)

    assert stats["totalCommandes"] == 1
    assert stats["totalQuantite"] == 100
    assert stats["moinsClient"] == "A"
    assert stats["meilleurTransporteur"] == "Trans Express"
    assert stats["depotPlusActif"] == "Dépôt de Vridi"
    assert stats["quantiteParProduit"] == {"Gazoil": 100}


def test_month_bounds_are_inclusive():
    commandes = [
        build_commande(client="debut", date_chargement=date(2026, 10, 1)),
        build_commande(client="fin", date_chargement=date(2026, 10, 31)),
        build_commande(client="apres", date_chargement=date(2026, 11, 1)),
    ]

    stats = compute_monthly_stats(commandes, NOW)

    assert stats["totalCommandes"] == 2
    assert month_bounds(datetime(2024, 2, 10)) == (date(2024, 2, 1), date(2024, 2, 29))


def test_empty_month_reports_not_available():
    stats = compute_monthly_stats([build_commande(date_chargement=LAST_MONTH)], NOW)

    assert stats == {
        "totalCommandes": 0,
        "totalQuantite": 0,
        "quantiteParProduit": {},
        "meilleurClient": "N/A",
        "meilleurClientCommandes": 0,
        "moinsClient": "N/A",
        "moinsClientCommandes": 0,
        "meilleurTransporteur": "N/A",
        "meilleurTransporteurLivraisons": 0,
        "depotPlusActif": "N/A",
        "depotPlusActifQuantite": 0,
    }


def test_single_client_is_both_best_and_worst():
    commandes = [build_commande(client="Seul", date_chargement=THIS_MONTH) for _ in range(3)]

    stats = compute_monthly_stats(commandes, NOW)

    assert stats["meilleurClient"] == stats["moinsClient"] == "Seul"
    assert stats["meilleurClientCommandes"] == stats["moinsClientCommandes"] == 3


def test_ties_are_won_by_first_seen_key():
    commandes = [
        build_commande(client="X", date_chargement=THIS_MONTH, depot="D1", quantite=50),
        build_commande(client="Y", date_chargement=THIS_MONTH, depot="D2", quantite=50),
        build_commande(client="Z", date_chargement=THIS_MONTH, depot="D3", quantite=50),
    ]

    stats = compute_monthly_stats(commandes, NOW)

    assert stats["meilleurClient"] == "X"
    # Dernière entrée du classement stable, pas une recherche de minimum
    assert stats["moinsClient"] == "Z"
    assert stats["depotPlusActif"] == "D1"


def test_best_carrier_counts_only_delivered_orders():
    commandes = [
        build_commande(transporteur="Rapide", statut=Statut.EN_COURS, date_chargement=THIS_MONTH),
        build_commande(transporteur="Rapide", statut=Statut.NON_LIVRE, date_chargement=THIS_MONTH),
        build_commande(transporteur="Sûr", statut=Statut.LIVRE, date_chargement=THIS_MONTH),
    ]

    stats = compute_monthly_stats(commandes, NOW)

    assert stats["meilleurTransporteur"] == "Sûr"
    assert stats["meilleurTransporteurLivraisons"] == 1


def test_no_delivered_order_reports_not_available_carrier():
    stats = compute_monthly_stats([build_commande(date_chargement=THIS_MONTH)], NOW)

    assert stats["meilleurTransporteur"] == "N/A"
    assert stats["meilleurTransporteurLivraisons"] == 0


def test_quantities_per_product_and_depot():
    commandes = [
        build_commande(produit=Produit.GAZOIL, depot="Nord", quantite=1000.25, date_chargement=THIS_MONTH),
        build_commande(produit=Produit.JET_A1, depot="Sud", quantite=3000.5, date_chargement=THIS_MONTH),
        build_commande(produit=Produit.GAZOIL, depot="Nord", quantite=2500.5, date_chargement=THIS_MONTH),
    ]

    stats = compute_monthly_stats(commandes, NOW)

    assert stats["quantiteParProduit"] == {"Gazoil": 3500.75, "Jet A1": 3000.5}
    assert stats["depotPlusActif"] == "Nord"
    assert stats["depotPlusActifQuantite"] == 3501
    assert stats["totalQuantite"] == 6501


def test_non_numeric_quantity_counts_as_zero():
    commandes = [
        build_commande(quantite="abc", date_chargement=THIS_MONTH),
        build_commande(quantite="250", date_chargement=THIS_MONTH),
    ]

    stats = compute_monthly_stats(commandes, NOW)

    assert stats["totalCommandes"] == 2
    assert stats["totalQuantite"] == 250


def test_round_half_up():
    assert round_half_up(10.5) == 11
    assert round_half_up(11.5) == 12
    assert round_half_up(10.49) == 10
    assert round_half_up(0) == 0


class _FixedRepository:
    def __init__(self, commandes):
        self.commandes = commandes

    def find_all(self):
        return list(self.commandes)


def test_stats_service_reads_every_order_from_repository():
    service = StatsService(_FixedRepository([
        build_commande(client="A", date_chargement=THIS_MONTH),
        build_commande(client="B", date_chargement=LAST_MONTH),
    ]))

    stats = service.monthly_stats(now=NOW)

    assert stats["totalCommandes"] == 1
    assert stats["meilleurClient"] == "A"
