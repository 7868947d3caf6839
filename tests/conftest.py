# tests/conftest.py
import pytest

from morphs.collection import Collection, Factory
from morphs.engine import MorphsEngine
from morphs.ln import make_address

ACCOUNTS = tuple(make_address("account", i) for i in range(4))


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def accounts():
    """Four test accounts. ``accounts[0]`` owns created collections."""
    return list(ACCOUNTS)


@pytest.fixture
def factory():
    factory = Factory()
    factory.register_implementation("erc721", Collection)
    return factory


@pytest.fixture
def engine():
    return MorphsEngine()


@pytest.fixture
def create_collection(factory, engine, accounts):
    def _create(
        name="Test",
        symbol="TEST",
        engine_=None,
        owner=None,
        implementation="erc721",
    ):
        address = factory.create_collection(
            name,
            symbol,
            implementation,
            engine_ or engine,
            owner or accounts[0],
        )
        return factory.collection(address)

    return _create
