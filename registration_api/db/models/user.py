from sqlalchemy import Column, Integer, String
from registration_api.db.session import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, nullable=False, index=True)
    email = Column(String, unique=True, nullable=False, index=True)
    # bcrypt hash, never the plaintext
    password = Column(String, nullable=False)
