"""storeshell package: line-oriented command interpreter over a file store."""

__version__ = "1.0.0"

__all__: list[str] = []
