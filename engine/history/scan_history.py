"""
Recent scans per user: who scanned what, and how it scored.
"""
from typing import Dict, List
from engine.schemas import HistoryEntry
import config


class ScanHistory:
    """
    Keep the most recent scans for each user, newest first.

    Process-local memory only. Each list is trimmed to `limit` entries
    (config.HISTORY_LIMIT) on every insert.
    """

    def __init__(self, limit: int = config.HISTORY_LIMIT):
        self.limit = limit
        self._entries: Dict[str, List[HistoryEntry]] = {}

    def add(self, user_id: str, entry: HistoryEntry) -> List[HistoryEntry]:
        """
        Record a scan for user.

        Args:
            user_id: User identifier
            entry: Scan summary to store

        Returns:
            The user's history after the insert (newest first)
        """
        entries = [entry] + self._entries.get(user_id, [])
        self._entries[user_id] = entries[:self.limit]
        return list(self._entries[user_id])

    def list(self, user_id: str) -> List[HistoryEntry]:
        """History for user, newest first (empty if none)"""
        return list(self._entries.get(user_id, []))

    def clear(self, user_id: str) -> int:
        """Drop user's history. Returns number of entries removed."""
        return len(self._entries.pop(user_id, []))

    def reset(self):
        """Drop all users' history"""
        self._entries.clear()

    def count(self) -> int:
        """Total entries held across all users"""
        return sum(len(entries) for entries in self._entries.values())


# Global instance
scan_history = ScanHistory()
