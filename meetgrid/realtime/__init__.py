"""Realtime synchronization (Socket.IO).

Sessions join one event, push their complete slot selection, and receive
the recomputed aggregate for that event as other participants change theirs.
"""
