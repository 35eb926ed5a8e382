"""Utility modules."""

from jobassist.utils.parser import extract_json, strip_code_fence

__all__ = ["extract_json", "strip_code_fence"]
