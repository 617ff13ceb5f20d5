from app.core.config import Settings, settings as default_settings
from app.core.logging import setup_logging
from app.db.session import build_engine, build_session_factory, init_db
from app.repositories.department_repo import DepartmentRepository
from app.services.department_service import DepartmentService


def create_app(settings: Settings | None = None) -> DepartmentService:
    """Wire logging, the database and the department service from settings."""
    settings = settings or default_settings

    logger = setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)

    engine = build_engine(settings.DATABASE_URL, settings.DATABASE_ECHO)
    init_db(engine)

    store = DepartmentRepository(build_session_factory(engine))
    return DepartmentService(store, logger=logger.getChild("departments"))
