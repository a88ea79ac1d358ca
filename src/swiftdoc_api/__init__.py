"""SwiftDoc API - read-only JSON API over the Swift standard library docs."""

__version__ = "0.2.0"
