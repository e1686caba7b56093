"""
Configuration partagée pour les tests.

Chaque test API obtient une application neuve sur une base SQLite en mémoire,
avec le compte Superadmin créé au démarrage.
"""

import pytest
from fastapi.testclient import TestClient

from app import create_app
from config import Config
from factories import SEED_PASSWORD, SEED_USERNAME, build_commande_payload


@pytest.fixture
def commande_payload():
    return build_commande_payload


@pytest.fixture
def config(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    monkeypatch.setenv("SESSION_STORE", "memory")
    monkeypatch.setenv("SESSION_SECRET", "test-secret")
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.setenv("SEED_USERNAME", SEED_USERNAME)
    monkeypatch.setenv("SEED_PASSWORD", SEED_PASSWORD)
    return Config()


@pytest.fixture
def client(config):
    """Client de test (le lifespan crée les tables et le compte initial)"""
    with TestClient(create_app(config)) as client:
        yield client


@pytest.fixture
def auth_client(client):
    """Client déjà connecté avec le compte Superadmin"""
    response = client.post(
        "/api/auth/login",
        json={"username": SEED_USERNAME, "password": SEED_PASSWORD}
    )
    assert response.status_code == 200
    return client
