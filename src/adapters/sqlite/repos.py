import sqlite3
from datetime import date
from typing import Any
from uuid import uuid4

from src.components.invoices import InvoiceFields, NewInvoice, PersistenceError
from src.domain.entities import Invoice


# Helper to convert sqlite rows to dicts
def dict_factory(cursor: sqlite3.Cursor, row: Any) -> dict[str, Any]:
    d = {}
    for idx, col in enumerate(cursor.description):
        d[col[0]] = row[idx]
    return d


class SQLiteInvoiceRepo:
    def __init__(self, db_path: str):
        self.db_path = db_path

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = dict_factory
        conn.execute("PRAGMA foreign_keys = ON;")
        return conn

    def insert(self, invoice: NewInvoice) -> str:
        invoice_id = str(uuid4())
        try:
            conn = self._get_conn()
            try:
                conn.execute(
                    """
                    INSERT INTO invoices (id, customer_id, amount, status, date)
                    VALUES (?, ?, ?, ?, ?)
                """,
                    (
                        invoice_id,
                        invoice.customer_id,
                        invoice.amount_cents,
                        invoice.status,
                        invoice.date.isoformat(),
                    ),
                )
                conn.commit()
                return invoice_id
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise PersistenceError(f"insert failed: {e}") from e

    def update(self, invoice_id: str, fields: InvoiceFields) -> int:
        try:
            conn = self._get_conn()
            try:
                cursor = conn.execute(
                    """
                    UPDATE invoices
                    SET customer_id = ?, amount = ?, status = ?
                    WHERE id = ?
                """,
                    (fields.customer_id, fields.amount_cents, fields.status, invoice_id),
                )
                conn.commit()
                return cursor.rowcount
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise PersistenceError(f"update failed: {e}") from e

    def delete(self, invoice_id: str) -> int:
        try:
            conn = self._get_conn()
            try:
                cursor = conn.execute("DELETE FROM invoices WHERE id = ?", (invoice_id,))
                conn.commit()
                return cursor.rowcount
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise PersistenceError(f"delete failed: {e}") from e

    def get_by_id(self, invoice_id: str) -> Invoice | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT * FROM invoices WHERE id = ?", (invoice_id,)).fetchone()
            return self._map_row(row) if row else None
        finally:
            conn.close()

    def list_all(self) -> list[Invoice]:
        conn = self._get_conn()
        try:
            rows = conn.execute("SELECT * FROM invoices ORDER BY date DESC, id ASC").fetchall()
            return [self._map_row(row) for row in rows]
        finally:
            conn.close()

    def _map_row(self, row: dict[str, Any]) -> Invoice:
        return Invoice(
            id=row["id"],
            customer_id=row["customer_id"],
            amount=row["amount"],
            status=row["status"],
            date=date.fromisoformat(row["date"]),
        )
