from datetime import datetime, timezone

import pytest

from morphs._errors import MintingClosedError
from morphs.config import MorphsSettings
from morphs.engine import MorphsEngine

ENDS_AT = MorphsEngine.MINTING_ENDS_AT_TIMESTAMP


def make_engine(now, enforce=True):
    config = MorphsSettings(_env_file=None, ENFORCE_MINTING_DEADLINE=enforce)
    return MorphsEngine(settings=config, clock=lambda: now)


class TestMintingOpen:
    def test_before_deadline(self):
        assert make_engine(ENDS_AT - 1).minting_open() is True

    def test_at_deadline(self):
        assert make_engine(ENDS_AT).minting_open() is False

    def test_explicit_datetime(self):
        engine = make_engine(0)
        closes = datetime(2022, 3, 1, 6, 0, tzinfo=timezone.utc)
        assert engine.minting_open(closes) is False
        assert engine.minting_open(datetime(2022, 2, 1)) is True

    def test_now_uses_clock(self):
        engine = make_engine(ENDS_AT)
        assert engine.now() == datetime(2022, 3, 1, 6, 0, tzinfo=timezone.utc)


class TestEnforcement:
    def test_open_mint_succeeds(self, create_collection, accounts):
        engine = make_engine(ENDS_AT - 60)
        collection = create_collection(engine_=engine)
        assert engine.mint(collection, sender=accounts[0]) == 1

    def test_closed_mint_rejected(self, create_collection, accounts):
        engine = make_engine(ENDS_AT + 60)
        collection = create_collection(engine_=engine)
        with pytest.raises(MintingClosedError) as exc:
            engine.mint(collection, sender=accounts[0])
        assert exc.value.details["ends_at"] == ENDS_AT
        assert collection.total_supply() == 0

    def test_closed_batch_rejected(self, create_collection, accounts):
        engine = make_engine(ENDS_AT + 60)
        collection = create_collection(engine_=engine)
        with pytest.raises(MintingClosedError):
            engine.batch_mint(collection, 3, sender=accounts[0])
        assert engine.era_state(collection).mint_calls == 0

    def test_not_enforced(self, create_collection, accounts):
        engine = make_engine(ENDS_AT + 60, enforce=False)
        collection = create_collection(engine_=engine)
        assert engine.mint(collection, sender=accounts[0]) == 1
        assert engine.minting_open() is False

    def test_cutover_ignores_deadline(self, create_collection, accounts):
        engine = make_engine(ENDS_AT + 60)
        collection = create_collection(engine_=engine)
        assert engine.cutover(collection, sender=accounts[0]) == 1
