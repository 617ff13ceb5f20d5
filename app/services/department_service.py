import logging

from app.core.exceptions import DuplicateNameError, NotFoundError, NullArgumentError, ValidationError
from app.db.models.department import Department
from app.repositories.base import RecordStore
from app.services.validation import validate_department


class DepartmentService:
    """
    Validates departments and keeps their names unique before handing
    them to the record store.

    The uniqueness check is read-then-write and is not atomic across
    concurrent callers; the store's unique index rejects a racing duplicate
    with StoreError.
    """

    def __init__(self, store: RecordStore, logger: logging.Logger | None = None):
        if store is None:
            raise NullArgumentError("store")
        self.store = store
        self.logger = logger or logging.getLogger("app.services.department_service")

    def _validate(self, department: Department, action: str) -> None:
        try:
            validate_department(department)
        except ValidationError as exc:
            self.logger.warning("Rejected %s of department: %s", action, exc)
            raise

    def _ensure_unique_name(self, department: Department, action: str, exclude_id: int | None = None) -> None:
        if self.store.find_where(name=department.name, exclude_id=exclude_id):
            self.logger.warning("Rejected %s of department: name %r already exists", action, department.name)
            raise DuplicateNameError(department.name)

    # Create Department
    def add_department(self, department: Department) -> Department:
        if department is None:
            raise NullArgumentError("department")

        self._validate(department, "add")
        self._ensure_unique_name(department, "add")

        department.id = self.store.insert(department)
        self.logger.info("Added department id=%s name=%r", department.id, department.name)
        return department

    # Update Department
    def update_department(self, department: Department) -> Department:
        if department is None:
            raise NullArgumentError("department")

        self._validate(department, "update")
        self._ensure_unique_name(department, "update", exclude_id=department.id)

        try:
            self.store.update(department)
        except NotFoundError:
            self.logger.warning("Rejected update of department: id=%s not found", department.id)
            raise
        self.logger.info("Updated department id=%s name=%r", department.id, department.name)
        return department

    # Hard delete Department
    def delete_department(self, department: Department) -> None:
        if department is None:
            raise NullArgumentError("department")

        try:
            self.store.delete(department)
        except NotFoundError:
            self.logger.warning("Rejected delete of department: id=%s not found", department.id)
            raise
        self.logger.info("Deleted department id=%s", department.id)

    def get_all_departments(self) -> list[Department]:
        return list(self.store.find_all())

    # Get Department by ID
    def get_department_by_id(self, department_id: int) -> Department | None:
        return self.store.find_by_id(department_id)

    # Get Department by exact name
    def get_department_by_name(self, name: str) -> Department | None:
        if name is None:
            raise NullArgumentError("name")
        matches = self.store.find_where(name=name)
        return matches[0] if matches else None

    # Search Departments by name keyword (case-sensitive substring)
    def search_departments_by_name(self, keyword: str) -> list[Department]:
        if keyword is None:
            raise NullArgumentError("keyword")
        return list(self.store.find_where(name_contains=keyword))
