# Shared pytest fixtures
from __future__ import annotations
import shutil
import tempfile
from pathlib import Path
import pytest

from cart_parser.logging.init import reset_logging

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SAMPLE_CART = PROJECT_ROOT / "samples" / "cart.csv"


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture(autouse=True)
def clean_logging():
    # logger handler は生成時の sys.stderr に束縛されるため毎回作り直す
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def sample_cart_text() -> str:
    return """Product name,Price,Quantity
Mollis consequat,9.00,2
Tvoluptatem,10.32,1
Scelerisque lacinia,18.90,1
Consectetur adipiscing,28.72,10
Condimentum aliquet,13.90,1
"""


@pytest.fixture()
def sample_cart_file(temp_workdir: Path) -> Path:
    dest = temp_workdir / "data" / "cart.csv"
    shutil.copyfile(SAMPLE_CART, dest)
    return dest


@pytest.fixture()
def sample_config_yaml() -> str:
    return """source_file: ./data/cart.csv
logs_directory: ./logs
write_error_log: true
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "cart.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def sequential_ids():
    counter = {"n": 0}

    def factory() -> str:
        counter["n"] += 1
        return f"item-{counter['n']}"
    return factory
