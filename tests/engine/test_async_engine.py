import anyio
import pytest

from morphs._errors import InvalidCutoverError


@pytest.mark.anyio
class TestAsyncEngine:
    async def test_amint(self, create_collection, engine, accounts):
        collection = create_collection()
        assert await engine.amint(collection, 2, sender=accounts[0]) == 1
        assert engine.metadata(collection, 1).attribute("Affinity") == (
            "Cosmic"
        )

    async def test_concurrent_mints_are_gap_free(
        self, create_collection, engine, accounts
    ):
        collection = create_collection()
        ids = []

        async def mint(i):
            ids.append(
                await engine.amint(collection, i % 3, sender=accounts[i % 4])
            )

        async with anyio.create_task_group() as tg:
            for i in range(50):
                tg.start_soon(mint, i)

        assert sorted(ids) == list(range(1, 51))
        assert collection.total_supply() == 50
        state = engine.era_state(collection)
        assert state.minted_count == 50
        assert state.mint_calls == 50

    async def test_concurrent_cutover_happens_once(
        self, create_collection, engine, accounts
    ):
        collection = create_collection()
        engine.batch_mint(collection, 4, sender=accounts[1])
        results = []

        async def cutover():
            try:
                results.append(
                    await engine.acutover(collection, sender=accounts[0])
                )
            except InvalidCutoverError:
                results.append(None)

        async with anyio.create_task_group() as tg:
            for _ in range(10):
                tg.start_soon(cutover)

        assert [r for r in results if r is not None] == [5]
        assert results.count(None) == 9

    async def test_abatch_mint(self, create_collection, engine, accounts):
        collection = create_collection()
        batches = []

        async def batch():
            batches.append(
                await engine.abatch_mint(collection, 5, sender=accounts[1])
            )

        async with anyio.create_task_group() as tg:
            for _ in range(4):
                tg.start_soon(batch)

        assert sorted(i for b in batches for i in b) == list(range(1, 21))
        for ids in batches:
            assert ids == list(range(ids[0], ids[0] + 5))
            groups = {
                engine.metadata(collection, i).attribute("Group") for i in ids
            }
            assert len(groups) == 1
