"""
Persistence for Book records.

All queries use parameterized statements.  Every public method opens
its own connection and closes it before returning.
"""

from __future__ import annotations

import sqlite3
from typing import List, Optional, Tuple

from library_api.app.core.db import get_connection
from library_api.app.core.pagination import PageRequest, PageResult
from library_api.app.models import Book
from library_api.app.repositories._sql import escape_like, fits_integer, raise_if_unique_violation

# Columns that take part in filter-by-example matching.
EXAMPLE_COLUMNS = ("title", "author", "isbn")


class BookRepository:
    def save(self, book: Book) -> Book:
        """Insert ``book`` when it has no id yet, update it otherwise."""
        conn = get_connection()
        try:
            cursor = conn.cursor()
            try:
                if book.id is None:
                    cursor.execute(
                        "INSERT INTO books (title, author, isbn) VALUES (?, ?, ?)",
                        (book.title, book.author, book.isbn),
                    )
                    book_id = cursor.lastrowid
                else:
                    cursor.execute(
                        "UPDATE books SET title = ?, author = ?, isbn = ? WHERE id = ?",
                        (book.title, book.author, book.isbn, book.id),
                    )
                    book_id = book.id
            except sqlite3.IntegrityError as exc:
                raise_if_unique_violation(exc)
                raise
            conn.commit()
            row = cursor.execute("SELECT * FROM books WHERE id = ?", (book_id,)).fetchone()
            return self._row_to_book(row)
        finally:
            conn.close()

    def get_by_id(self, book_id: int) -> Optional[Book]:
        if not fits_integer(book_id):
            # No row can carry an id outside the INTEGER range.
            return None
        conn = get_connection()
        try:
            row = conn.execute("SELECT * FROM books WHERE id = ?", (book_id,)).fetchone()
            return self._row_to_book(row) if row else None
        finally:
            conn.close()

    def get_by_isbn(self, isbn: str) -> Optional[Book]:
        conn = get_connection()
        try:
            row = conn.execute("SELECT * FROM books WHERE isbn = ?", (isbn,)).fetchone()
            return self._row_to_book(row) if row else None
        finally:
            conn.close()

    def exists_by_isbn(self, isbn: str) -> bool:
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT EXISTS(SELECT 1 FROM books WHERE isbn = ?) AS found", (isbn,)
            ).fetchone()
            return bool(row["found"])
        finally:
            conn.close()

    def delete(self, book: Book) -> None:
        conn = get_connection()
        try:
            conn.execute("DELETE FROM books WHERE id = ?", (book.id,))
            conn.commit()
        finally:
            conn.close()

    def find_by_example(self, example: Book, page_request: PageRequest) -> PageResult[Book]:
        """Return a page of books matching every non-empty field of ``example``.

        Matching is a case-insensitive substring test; empty or missing
        fields match anything.
        """
        where, params = self._example_predicates(example)
        conn = get_connection()
        try:
            total = conn.execute(
                f"SELECT COUNT(*) AS total FROM books{where}", params
            ).fetchone()["total"]
            rows = conn.execute(
                f"SELECT * FROM books{where} ORDER BY id LIMIT ? OFFSET ?",
                (*params, page_request.size, page_request.offset),
            ).fetchall()
            return PageResult(
                content=[self._row_to_book(row) for row in rows],
                page_request=page_request,
                total_elements=total,
            )
        finally:
            conn.close()

    @staticmethod
    def _example_predicates(example: Book) -> Tuple[str, tuple]:
        clauses: List[str] = []
        params: List[str] = []
        for column in EXAMPLE_COLUMNS:
            value = getattr(example, column)
            if value:
                clauses.append(f"LOWER({column}) LIKE ? ESCAPE '\\'")
                params.append(f"%{escape_like(value.lower())}%")
        if not clauses:
            return "", ()
        return " WHERE " + " AND ".join(clauses), tuple(params)

    @staticmethod
    def _row_to_book(row: sqlite3.Row) -> Book:
        return Book(id=row["id"], title=row["title"], author=row["author"], isbn=row["isbn"])
