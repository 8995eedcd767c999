from sqlalchemy import inspect
from sqlalchemy.pool import StaticPool

from reception.database import init_db, make_engine, make_session_factory
from reception.models import log, settings, staff_member  # noqa: F401
from reception.models.company import Company


def test_init_db_creates_all_tables():
    engine = make_engine("sqlite://", poolclass=StaticPool)
    init_db(engine)

    assert set(inspect(engine).get_table_names()) >= {
        "companies",
        "staff_members",
        "chatwork_settings",
        "walkin_settings",
        "visitor_logs",
        "error_logs",
    }
    engine.dispose()


def test_init_db_is_idempotent():
    engine = make_engine("sqlite://", poolclass=StaticPool)
    init_db(engine)
    session_factory = make_session_factory(engine)
    with session_factory() as db:
        db.add(Company(name="Acme"))
        db.commit()

    init_db(engine)

    with session_factory() as db:
        assert db.query(Company).count() == 1
    engine.dispose()
