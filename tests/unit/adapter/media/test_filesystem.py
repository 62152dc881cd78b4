"""Unit tests for FilesystemMediaStore."""

import asyncio

import pytest

from social.adapter.media import FilesystemMediaStore
from social.domain.error import OperationTimeoutError, StorageError
from social.domain.repository.media import PROFILE_SCOPE
from social.util.deadline import deadline


@pytest.fixture
def store(tmp_path):
    return FilesystemMediaStore(tmp_path, io_timeout=5)


class TestFilesystemMediaStore:
    """Tests for the filesystem media store."""

    @pytest.mark.asyncio
    async def test_provision_creates_scope_directory(self, store, tmp_path):
        await store.provision(3, "post10")

        assert (tmp_path / "imgs" / "user-3" / "post10").is_dir()

    @pytest.mark.asyncio
    async def test_provision_is_repeatable(self, store, tmp_path):
        await store.provision(3, PROFILE_SCOPE)
        await store.provision(3, PROFILE_SCOPE)

        assert (tmp_path / "imgs" / "user-3" / PROFILE_SCOPE).is_dir()

    @pytest.mark.asyncio
    async def test_write_then_read(self, store, tmp_path):
        await store.provision(3, "post10")
        path = store.allocate_path(3, "post10", 0)

        await store.write(path, b"\xff\xd8jpeg")

        assert path == "imgs/user-3/post10/0.jpg"
        assert (tmp_path / path).read_bytes() == b"\xff\xd8jpeg"
        assert await store.read(path) == b"\xff\xd8jpeg"

    @pytest.mark.asyncio
    async def test_write_without_provision_fails(self, store):
        with pytest.raises(StorageError):
            await store.write("imgs/user-3/post10/0.jpg", b"data")

    @pytest.mark.asyncio
    async def test_read_missing_file(self, store):
        with pytest.raises(StorageError):
            await store.read("imgs/user-3/post10/0.jpg")

    @pytest.mark.asyncio
    async def test_path_outside_root_is_refused(self, store):
        with pytest.raises(StorageError):
            await store.read("../outside.jpg")

    @pytest.mark.asyncio
    async def test_passed_deadline_aborts_the_write(self, store, tmp_path):
        await store.provision(3, "post10")
        path = store.allocate_path(3, "post10", 0)

        with deadline(0.01):
            await asyncio.sleep(0.05)
            with pytest.raises(OperationTimeoutError):
                await store.write(path, b"data")

        assert not (tmp_path / path).exists()
