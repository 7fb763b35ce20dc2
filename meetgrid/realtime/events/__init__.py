"""Domain-specific realtime payloads.

These modules build the wire payloads only. They must not define Socket.IO
server instances, connection handlers or delivery logic.
"""
