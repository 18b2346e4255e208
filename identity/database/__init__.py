from .database import Base, SessionLocal, build_engine, engine, transaction_scope
from . import models

__all__ = ["Base", "SessionLocal", "build_engine", "engine", "transaction_scope", "models"]
