import json
import logging
import random
from pathlib import Path

import pytest
from pytest import FixtureRequest

from nethermind.cairo_decoder.decoding import build_catalog
from nethermind.cairo_decoder.decoding.utils import FIELD_PRIME
from nethermind.cairo_decoder.types.decoding import AbiCatalog
from tests.resources.abi import CAIRO_ZERO_ABI_JSON, STARKNET_TOKEN_ABI_JSON


@pytest.fixture(name="token_abi")
def fixture_token_abi() -> list[dict]:
    return json.loads(STARKNET_TOKEN_ABI_JSON)


@pytest.fixture(name="token_catalog")
def fixture_token_catalog(token_abi) -> AbiCatalog:
    return build_catalog(token_abi)


@pytest.fixture(name="cairo_zero_abi")
def fixture_cairo_zero_abi() -> list[dict]:
    return json.loads(CAIRO_ZERO_ABI_JSON)


@pytest.fixture(name="random_address")
def fixture_random_address():
    def _generate_random_address() -> int:
        # Large enough to never match the ByteArray layout
        return random.randint(2**200, FIELD_PRIME - 1)

    return _generate_random_address


@pytest.fixture(scope="function")
def debug_logger(request: FixtureRequest):
    log_filename = request.module.__name__.replace("tests.", "") + "." + request.function.__name__

    parent_dir = Path(__file__).parent
    log_file = parent_dir / "logs" / f"{log_filename}.log"
    log_file.parent.mkdir(exist_ok=True)

    formatter = logging.Formatter(
        "%(levelname)-8s | %(name)-36s | %(asctime)-15s | %(message)s \t\t (%(filename)s --> %(funcName)s)"
    )

    file_handler = logging.FileHandler(log_file)
    file_handler.setFormatter(formatter)

    logger = logging.getLogger("nethermind")
    logger.addHandler(file_handler)
    logger.setLevel(logging.DEBUG)

    logger.info("-" * 100)
    logger.info(f"\t\tInitializing New Run for Test: {request.function.__name__}")
    logger.info("-" * 100)

    yield logger

    logger.removeHandler(file_handler)
    file_handler.close()
