"""Airtable tools."""

from .get_schema import GetAirtableSchemaTool

__all__ = ["GetAirtableSchemaTool"]
