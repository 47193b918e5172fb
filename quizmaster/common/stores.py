"""
Storage interface shared by the service layer.

Services receive store objects when they are constructed instead of
querying models directly, so tests can hand them in-memory fakes with
the same methods:

    get(entity_id)       -> entity or None (ids outside the key range never match)
    find(**criteria)     -> entities whose attributes equal the criteria, ordered by id
    all()                -> every entity, ordered by id
    add(entity)          -> stages a new entity and assigns its id
    delete(entity)       -> stages removal (owned rows follow by cascade)
    commit() / rollback()
"""
from quizmaster import db

# Integer primary keys are signed 64-bit on every supported backend
MAX_ID = 2 ** 63 - 1


class SqlAlchemyStore:
    """Store backed by a Flask-SQLAlchemy model and the scoped session."""

    def __init__(self, model, session=None):
        self.model = model
        self._session = session

    @property
    def session(self):
        return self._session if self._session is not None else db.session

    def get(self, entity_id):
        if not -MAX_ID - 1 <= entity_id <= MAX_ID:
            return None
        return self.session.get(self.model, entity_id)

    def find(self, **criteria):
        return (
            self.session.query(self.model)
            .filter_by(**criteria)
            .order_by(self.model.id)
            .all()
        )

    def all(self):
        return self.session.query(self.model).order_by(self.model.id).all()

    def exists(self, **criteria) -> bool:
        return self.session.query(
            self.session.query(self.model).filter_by(**criteria).exists()
        ).scalar()

    def add(self, entity):
        self.session.add(entity)
        # Flush so the primary key is available before commit
        self.session.flush()
        return entity

    def delete(self, entity) -> None:
        self.session.delete(entity)

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()
