"""User domain model, mapped to the 'users' table."""

from sqlalchemy import Column, Integer, Text

from userdeck.infrastructure.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False, unique=True)
    photo = Column(Text, nullable=True)

    def __repr__(self):
        return f"<User {self.email}>"
