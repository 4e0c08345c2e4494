"""Request builders for the GitHub REST API."""

from .teams import Permission, Teams, encode_segment

__all__ = [
    "Permission",
    "Teams",
    "encode_segment",
]
