"""Record store implementations."""

from sprintdesk_mcp.storage.memory import InMemoryRecordStore

__all__ = ["InMemoryRecordStore"]
