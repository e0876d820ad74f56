import pytest

from acme_basket.data import default_catalogue, default_delivery_rules, default_offers, new_basket


@pytest.fixture(autouse=True)
def debug_log_path(tmp_path, monkeypatch):
    """Keep debug lines out of /tmp during tests."""
    path = tmp_path / "debug.log"
    monkeypatch.setenv("ACME_BASKET_DEBUG_LOG", str(path))
    return path


@pytest.fixture
def catalogue():
    return default_catalogue()


@pytest.fixture
def delivery_rules():
    return default_delivery_rules()


@pytest.fixture
def offers():
    return default_offers()


@pytest.fixture
def basket():
    return new_basket()
