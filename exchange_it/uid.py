"""
Account identifier derivation.

An identifier is the hex digest of a hash over a user's name pair. It is
deterministic, not guaranteed unique, and not meant as a security token.

The hash algorithm is run-level configuration: it is read from
``EXCHANGE_IT_UID_HASH_ALGORITHM`` once, when this module is imported, so
reloading configuration later cannot change identifiers mid-run.
"""

import hashlib
import json
from typing import Any, Optional

from .config import get_config


UID_HASH_ALGORITHM = get_config().uid_hash_algorithm


def as_text(value: Any) -> str:
    """Textual form of a name part; None becomes the empty string"""
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def generate_uid(name: Any, surname: Any, algorithm: Optional[str] = None) -> str:
    """
    Derive a stable identifier from a given name and family name
    
    Args:
        name: Given name (converted to text)
        surname: Family name (converted to text)
        algorithm: hashlib algorithm name; defaults to UID_HASH_ALGORITHM
        
    Returns:
        Hex digest identifying the name pair
    """
    algorithm = algorithm or UID_HASH_ALGORITHM
    
    # JSON framing keeps ("ab", "c") apart from ("a", "bc")
    key_data = json.dumps([as_text(name), as_text(surname)], ensure_ascii=False)
    return hashlib.new(algorithm, key_data.encode('utf-8')).hexdigest()
