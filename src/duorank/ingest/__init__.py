"""Reading tournament results from disk."""

from duorank.ingest.results import ResultIngester, parse_ranks

__all__ = ["ResultIngester", "parse_ranks"]
