"""Declarative base shared by every ProFlow table."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
