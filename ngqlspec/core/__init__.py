"""Prepared statement core."""

from ngqlspec.core.statement import PreparedStatement, StatementConfig, get_default_config

__all__ = ("PreparedStatement", "StatementConfig", "get_default_config")
