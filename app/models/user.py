from sqlalchemy import Column, Identity, Integer, String
from app.db.base import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, Identity(always=True), primary_key=True)
    name = Column(String(255), nullable=False)
    age = Column(Integer, nullable=False)
    email = Column(String(255), nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r}>"


users_table = User.__table__
