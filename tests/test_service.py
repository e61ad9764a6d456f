from __future__ import annotations

import pytest

from shortlink.codegen import CHARSET, CODE_LENGTH
from shortlink.domain import ShortURL, URLNotFoundError, URLRepository
from shortlink.service import ServiceError, URLService
from shortlink.sqlite_repository import RepositoryError, SQLiteRepository


class MemoryRepository(URLRepository):
    def __init__(self) -> None:
        self.items: dict[str, ShortURL] = {}

    def save(self, url: ShortURL) -> ShortURL:
        saved = ShortURL(
            original_url=url.original_url,
            short_code=url.short_code,
            id=len(self.items) + 1,
        )
        self.items[url.short_code] = saved
        return saved

    def find_by_code(self, code: str) -> ShortURL:
        try:
            return self.items[code]
        except KeyError:
            raise URLNotFoundError() from None


class FailingRepository(URLRepository):
    def save(self, url: ShortURL) -> ShortURL:
        raise RepositoryError("disk full")

    def find_by_code(self, code: str) -> ShortURL:
        raise RepositoryError("broken")


def test_create_uses_injected_generator():
    repo = MemoryRepository()
    service = URLService(repo, lambda: "fixed123")
    result = service.create_short_url("https://example.com/page")
    assert result.short_code == "fixed123"
    assert result.original_url == "https://example.com/page"
    assert repo.items["fixed123"].original_url == "https://example.com/page"


def test_default_generator_produces_valid_code():
    service = URLService(MemoryRepository())
    result = service.create_short_url("https://example.com")
    assert len(result.short_code) == CODE_LENGTH
    assert set(result.short_code) <= set(CHARSET)


def test_round_trip_through_service():
    service = URLService(MemoryRepository())
    created = service.create_short_url("https://example.com/a")
    found = service.get_original_url(created.short_code)
    assert found.original_url == "https://example.com/a"
    assert found.id == created.id


def test_missing_code_raises_not_found():
    service = URLService(MemoryRepository())
    with pytest.raises(URLNotFoundError):
        service.get_original_url("nothere1")


def test_save_failure_is_wrapped():
    service = URLService(FailingRepository())
    with pytest.raises(ServiceError, match="could not save URL") as info:
        service.create_short_url("https://example.com")
    assert isinstance(info.value.__cause__, RepositoryError)


def test_find_failure_propagates_unchanged():
    service = URLService(FailingRepository())
    with pytest.raises(RepositoryError, match="broken"):
        service.get_original_url("abc")


def test_duplicate_code_with_sqlite_fails(tmp_path):
    with SQLiteRepository(tmp_path / "db.sqlite") as repo:
        service = URLService(repo, lambda: "samecode")
        first = service.create_short_url("https://example.com/1")
        assert first.id > 0
        with pytest.raises(ServiceError):
            service.create_short_url("https://example.com/2")
        assert service.get_original_url("samecode").original_url == "https://example.com/1"