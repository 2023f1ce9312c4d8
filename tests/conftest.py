import pytest

from des_trace import encrypt_block

from .vectors import KEY, PLAINTEXT


@pytest.fixture(scope="session")
def grabbe_trace():
    return encrypt_block(PLAINTEXT, KEY)
