"""
dbapi - asynchronous client for the Deutsche Bahn open-data APIs.

Currently implements the StationData (StaDa v2) API with client-side rate
limiting and typed responses and errors.
"""

__version__ = "0.1.0"

from .client import DBAPIClient
from .config import ClientConfig, StationDataConfig, load_config

__all__ = [
    "DBAPIClient",
    "ClientConfig",
    "StationDataConfig",
    "load_config",
]
