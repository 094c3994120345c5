"""Database layer package for all SQL and persistence boundaries."""

from .health import SQLAlchemyDatabaseHealthService
from .interfaces import DatabaseHealthPort, VesselBookRepositoryPort
from .session import db_create_engine
from .vessel_book import SQLAlchemyVesselBookService

__all__ = [
	"DatabaseHealthPort",
	"VesselBookRepositoryPort",
	"SQLAlchemyDatabaseHealthService",
	"SQLAlchemyVesselBookService",
	"db_create_engine",
]
