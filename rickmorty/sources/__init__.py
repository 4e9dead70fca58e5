from rickmorty.sources.base import EntitySource, SourceUnavailableError

__all__ = ["EntitySource", "SourceUnavailableError"]
