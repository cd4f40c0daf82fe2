from .helpers import camel_case, now_iso

__all__ = ["camel_case", "now_iso"]
