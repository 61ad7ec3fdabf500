"""Routing — regex route templates compiled into per-language buckets.

Routes are registered during setup and the table is frozen before
serving. Matching is a first-match-wins linear scan of one bucket.
"""
