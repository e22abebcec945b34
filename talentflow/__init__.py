"""
TalentFlow local store.

A local-first mock backend for a hiring pipeline: durable tables, a paginated
query surface, an ordered-list reorder transaction and simulated network
latency/failure.
"""

__version__ = "0.1.0"
