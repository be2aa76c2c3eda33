from collections.abc import Iterator
from typing import Any

import pytest

from atlas_chain_config import ChainConfigRegistry, reset_default_registry

from .helpers.factories import (
    BASE_SEPOLIA,
    POLYGON,
    POLYGON_RECORD_JSON,
    make_record_json,
)


@pytest.fixture
def baseline_json() -> dict[str, Any]:
    """Chain config document: Polygon 1.0.0, Base Sepolia 1.1 and 1.2."""
    return {
        str(POLYGON): {"1.0.0": POLYGON_RECORD_JSON},
        str(BASE_SEPOLIA): {
            "1.1": make_record_json(seed=2, chain_id=BASE_SEPOLIA),
            "1.2": make_record_json(seed=3, chain_id=BASE_SEPOLIA),
        },
    }


@pytest.fixture
def baseline(baseline_json: dict[str, Any]) -> ChainConfigRegistry:
    return ChainConfigRegistry.from_json(baseline_json)


@pytest.fixture(autouse=True)
def _reset_default_registry() -> Iterator[None]:
    reset_default_registry()
    yield
    reset_default_registry()
