import threading
from datetime import datetime, timezone

import pytest

from morphs._errors import ValidationError
from morphs.ln import (
    UINT256_MAX,
    check_address,
    check_int,
    coerce_created_at,
    json_dumpb,
    json_loads,
    make_address,
    normalize_address,
    now_utc,
    synchronized,
)


class TestAddresses:
    def test_make_address_shape(self):
        addr = make_address("collection", 1)
        assert addr.startswith("0x")
        assert len(addr) == 42
        assert addr == addr.lower()

    def test_make_address_is_deterministic(self):
        assert make_address("a", 1) == make_address("a", 1)
        assert make_address("a", 1) != make_address("a", 2)

    def test_normalize_lowercases(self):
        addr = "0x" + "AB" * 20
        assert normalize_address(addr) == "0x" + "ab" * 20

    def test_normalize_uppercase_prefix(self):
        addr = make_address("x")
        assert normalize_address(addr.upper()) == addr

    def test_normalize_object_with_address(self):
        class Holder:
            address = "0x" + "01" * 20

        assert normalize_address(Holder()) == "0x" + "01" * 20

    @pytest.mark.parametrize(
        "value", ["0x123", "0x" + "zz" * 20, "ab" * 21, 5, None]
    )
    def test_normalize_rejects(self, value):
        with pytest.raises(ValueError):
            normalize_address(value)


class TestTime:
    def test_now_utc_is_aware(self):
        assert now_utc().tzinfo is timezone.utc

    def test_coerce_naive_datetime(self):
        dt = coerce_created_at(datetime(2022, 3, 1))
        assert dt.tzinfo is timezone.utc

    def test_coerce_timestamp(self):
        dt = coerce_created_at(1646114400)
        assert dt == datetime(2022, 3, 1, 6, 0, tzinfo=timezone.utc)

    def test_coerce_rejects_bool(self):
        with pytest.raises(ValueError):
            coerce_created_at(True)

    def test_coerce_rejects_string(self):
        with pytest.raises(ValueError):
            coerce_created_at("yesterday")


class TestJson:
    def test_key_order_preserved(self):
        assert json_dumpb({"b": 1, "a": 2}) == b'{"b":1,"a":2}'

    def test_sort_keys(self):
        assert json_dumpb({"b": 1, "a": 2}, sort_keys=True) == b'{"a":2,"b":1}'

    def test_sets_are_sorted(self):
        assert json_dumpb({"s": {"b", "a"}}) == b'{"s":["a","b"]}'

    def test_roundtrip(self):
        data = {"name": "Morph #1", "attributes": [{"trait_type": "Era"}]}
        assert json_loads(json_dumpb(data)) == data

    def test_unserializable(self):
        with pytest.raises(TypeError):
            json_dumpb({"x": object()})


class TestSynchronized:
    def test_serializes_increments(self):
        class Counter:
            def __init__(self):
                self._lock = threading.Lock()
                self.value = 0

            @synchronized
            def bump(self):
                current = self.value
                threading.Event().wait(0.0001)
                self.value = current + 1

        counter = Counter()
        def work():
            for _ in range(20):
                counter.bump()

        threads = [threading.Thread(target=work) for _ in range(5)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert counter.value == 100


class TestCheckInt:
    def test_accepts_in_range(self):
        assert check_int("flag", 0, 0) == 0
        assert check_int("flag", UINT256_MAX, 0, UINT256_MAX) == UINT256_MAX

    @pytest.mark.parametrize("value", [True, False, 1.0, "1", None])
    def test_rejects_non_int(self, value):
        with pytest.raises(ValidationError):
            check_int("flag", value, 0)

    def test_rejects_below_minimum(self):
        with pytest.raises(ValidationError) as exc:
            check_int("count", 0, 1)
        assert exc.value.details["expected"] == ">= 1"

    def test_rejects_above_maximum(self):
        with pytest.raises(ValidationError) as exc:
            check_int("flag", UINT256_MAX + 1, 0, UINT256_MAX)
        assert "value" not in exc.value.details

    def test_rejects_value_too_long_to_print(self):
        with pytest.raises(ValidationError):
            check_int("flag", 10**5000, 0, UINT256_MAX)


class TestCheckAddress:
    def test_normalizes(self):
        assert check_address("owner", "0x" + "AB" * 20) == "0x" + "ab" * 20

    @pytest.mark.parametrize("value", ["owner", "0x12", 7, None])
    def test_rejects(self, value):
        with pytest.raises(ValidationError) as exc:
            check_address("owner", value)
        assert exc.value.message == "Invalid owner"
        assert isinstance(exc.value.get_cause(), ValueError)
