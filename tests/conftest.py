import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    structlog.reset_defaults()


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Point the CLI composition root at an empty data directory."""
    monkeypatch.setenv("STOREFRONT_DATA_DIR", str(tmp_path))
    for key in (
        "STOREFRONT_TAX_RATE",
        "STOREFRONT_FREE_SHIPPING_THRESHOLD",
        "STOREFRONT_FLAT_SHIPPING_COST",
        "STOREFRONT_LOG_LEVEL",
        "STOREFRONT_LOG_JSON",
    ):
        monkeypatch.delenv(key, raising=False)
    return tmp_path
