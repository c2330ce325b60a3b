"""Business logic services package.

Contains the TMDB catalog client, presentation shaping of catalog records
and partitioning of presentation entries into album-sized batches.
"""
