"""
In-memory quiz registry with lookup, category filtering and answer-count reporting.
"""
