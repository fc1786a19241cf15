"""
resub.utils – Small shared utilities (hidden-name detection, file identity).
"""
from .paths import file_identity, is_hidden_name

__all__ = ["file_identity", "is_hidden_name"]
