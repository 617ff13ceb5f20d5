from typing import Protocol, Sequence

from app.db.models.department import Department


class RecordStore(Protocol):
    """Persistence operations the department service relies on."""

    def insert(self, record: Department) -> int: ...

    def update(self, record: Department) -> None: ...

    def delete(self, record: Department) -> None: ...

    def find_all(self) -> Sequence[Department]: ...

    def find_by_id(self, department_id: int) -> Department | None: ...

    def find_where(
        self,
        *,
        name: str | None = None,
        name_contains: str | None = None,
        exclude_id: int | None = None,
    ) -> Sequence[Department]: ...
