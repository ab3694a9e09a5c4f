import asyncio
from unittest.mock import Mock

import pytest

from library_api.app.core.exceptions import BusinessError, DataIntegrityError, IllegalArgumentError
from library_api.app.core.pagination import PageRequest, PageResult
from library_api.app.models import Book
from library_api.app.repositories import BookRepository
from library_api.app.services import BookService


@pytest.fixture
def repository():
    return Mock(spec=BookRepository)


@pytest.fixture
def service(repository):
    return BookService(repository)


def new_book(book_id=None):
    return Book(id=book_id, title="As aventuras", author="Fulano", isbn="123")


def test_save_book(service, repository):
    repository.exists_by_isbn.return_value = False
    repository.save.return_value = new_book(book_id=1)

    saved = asyncio.run(service.save(new_book()))

    assert saved.id == 1
    assert saved.isbn == "123"
    repository.save.assert_called_once()


def test_save_book_with_duplicate_isbn_never_persists(service, repository):
    repository.exists_by_isbn.return_value = True

    with pytest.raises(BusinessError, match="Isbn já cadastrado"):
        asyncio.run(service.save(new_book()))

    repository.save.assert_not_called()


def test_save_book_rejected_by_unique_index(service, repository):
    repository.exists_by_isbn.return_value = False
    repository.save.side_effect = DataIntegrityError("UNIQUE constraint failed: books.isbn")

    with pytest.raises(BusinessError) as exc_info:
        asyncio.run(service.save(new_book()))

    assert exc_info.value.message == "Isbn já cadastrado"


def test_get_by_id(service, repository):
    repository.get_by_id.return_value = new_book(book_id=7)

    book = asyncio.run(service.get_by_id(7))

    assert book.id == 7
    repository.get_by_id.assert_called_once_with(7)


def test_get_by_id_not_found_returns_none(service, repository):
    repository.get_by_id.return_value = None

    assert asyncio.run(service.get_by_id(7)) is None


@pytest.mark.parametrize("book", [None, Book(title="t", author="a", isbn="1")])
def test_update_without_id_fails(service, repository, book):
    with pytest.raises(IllegalArgumentError):
        asyncio.run(service.update(book))

    repository.save.assert_not_called()


@pytest.mark.parametrize("book", [None, Book(title="t", author="a", isbn="1")])
def test_delete_without_id_fails(service, repository, book):
    with pytest.raises(IllegalArgumentError):
        asyncio.run(service.delete(book))

    repository.delete.assert_not_called()


def test_update_book(service, repository):
    book = new_book(book_id=1)
    book.title = "Novo titulo"
    repository.save.return_value = book

    updated = asyncio.run(service.update(book))

    assert updated.title == "Novo titulo"
    repository.save.assert_called_once_with(book)


def test_delete_book(service, repository):
    book = new_book(book_id=1)

    asyncio.run(service.delete(book))

    repository.delete.assert_called_once_with(book)


def test_find_delegates_to_example_query(service, repository):
    page_request = PageRequest(page=0, size=10)
    expected = PageResult(content=[new_book(book_id=1)], page_request=page_request, total_elements=1)
    repository.find_by_example.return_value = expected
    example = Book(title="aventuras")

    result = asyncio.run(service.find(example, page_request))

    assert result is expected
    repository.find_by_example.assert_called_once_with(example, page_request)


def test_get_by_isbn(service, repository):
    repository.get_by_isbn.return_value = new_book(book_id=3)

    assert asyncio.run(service.get_by_isbn("123")).id == 3
