from sqlalchemy import Boolean, Column, Integer, Text
from todoserver.database import Base

class TodoRow(Base):
    __tablename__ = "todos"
    id = Column(Integer, primary_key=True, autoincrement=False)
    text = Column(Text, nullable=False)
    completed = Column(Boolean, nullable=False, default=False)
    # insertion order; the primary key is caller-assigned
    position = Column(Integer, nullable=False, index=True)
