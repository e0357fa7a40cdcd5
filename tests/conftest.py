# Shared pytest fixtures
from __future__ import annotations
import tempfile
from pathlib import Path
import pytest

from cart_parser.logging.init import reset_logging
from cart_parser.services.cart_parser import CartParser

VALID_CART = (
    "Product name,Price,Quantity\n"
    "Mollis consequat,9.00,2\n"
    "Tvoluptatem,10.32,1\n"
)

INVALID_CART = (
    "Product name,Price,Quantity\n"
    "Mollis consequat,-9.00,2\n"
    "Tvoluptatem,10.32\n"
)


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        (p / "logs").mkdir()
        monkeypatch.chdir(p)
        monkeypatch.delenv("CART_PARSER_CONFIG", raising=False)
        yield p


@pytest.fixture()
def sample_config_yaml() -> str:
    return """source_directory: ./data
output_directory: ./output
delimiter: ","
encoding: utf-8
detailed_errors: true
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "cart.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def sample_csv_files(temp_workdir: Path) -> dict[str, Path]:
    """One valid and one invalid cart in ./data."""
    files = {
        "valid": temp_workdir / "data" / "valid.csv",
        "invalid": temp_workdir / "data" / "invalid.csv",
    }
    files["valid"].write_text(VALID_CART, encoding="utf-8")
    files["invalid"].write_text(INVALID_CART, encoding="utf-8")
    return files


@pytest.fixture()
def valid_content() -> str:
    return VALID_CART


@pytest.fixture()
def invalid_content() -> str:
    return INVALID_CART


@pytest.fixture()
def parser() -> CartParser:
    return CartParser()


@pytest.fixture()
def clean_logging():
    reset_logging()
    yield
    reset_logging()
