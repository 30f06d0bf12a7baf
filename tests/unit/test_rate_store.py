"""Unit tests for rate at target stores."""

import pytest

from src.data.storage import DiskRateStore, InMemoryRateStore

MARKET_A = "0x" + "01" * 32
MARKET_B = "0x" + "02" * 32


class TestInMemoryRateStore:
    """Tests for InMemoryRateStore."""

    @pytest.fixture
    def store(self):
        return InMemoryRateStore()

    def test_missing_market(self, store):
        assert store.get(MARKET_A) is None
        assert MARKET_A not in store

    def test_create_if_absent(self, store):
        assert store.create(MARKET_A, 100) is True
        assert store.create(MARKET_A, 200) is False
        assert store.get(MARKET_A) == 100

    def test_set_existing(self, store):
        store.create(MARKET_A, 100)
        store.set(MARKET_A, 150)
        assert store.get(MARKET_A) == 150

    def test_set_missing_raises(self, store):
        with pytest.raises(KeyError):
            store.set(MARKET_A, 150)

    def test_iteration(self, store):
        store.create(MARKET_A, 1)
        store.create(MARKET_B, 2)
        assert sorted(store) == [MARKET_A, MARKET_B]
        assert len(store) == 2

    def test_initial_entries(self):
        store = InMemoryRateStore({MARKET_A: 7})
        assert store.get(MARKET_A) == 7


class TestDiskRateStore:
    """Tests for DiskRateStore."""

    @pytest.fixture
    def store(self, test_settings):
        store = DiskRateStore(test_settings)
        yield store
        store.close()

    def test_missing_market(self, store):
        assert store.get(MARKET_A) is None

    def test_create_if_absent(self, store):
        assert store.create(MARKET_A, 100) is True
        assert store.create(MARKET_A, 200) is False
        assert store.get(MARKET_A) == 100

    def test_set_missing_raises(self, store):
        with pytest.raises(KeyError):
            store.set(MARKET_A, 150)

    def test_uses_settings_directory(self, store, test_settings):
        store.create(MARKET_A, 1)
        assert (test_settings.store_dir / "dynamic_rate").is_dir()

    def test_persists_across_instances(self, test_settings):
        first = DiskRateStore(test_settings)
        first.create(MARKET_A, 100)
        first.set(MARKET_A, 125)
        first.close()

        second = DiskRateStore(test_settings)
        try:
            assert second.get(MARKET_A) == 125
            assert list(second) == [MARKET_A]
        finally:
            second.close()

    def test_namespaces_are_isolated(self, test_settings, tmp_path):
        left = DiskRateStore(test_settings, namespace="left", directory=tmp_path)
        right = DiskRateStore(test_settings, namespace="right", directory=tmp_path)
        try:
            left.create(MARKET_A, 1)
            assert right.get(MARKET_A) is None
            assert len(right) == 0
        finally:
            left.close()
            right.close()
