"""
Pool name validation.

From `man zpool-create`: the pool name must begin with a letter and can only
contain alphanumeric characters as well as underscore, dash, colon, space and
period. Reserved names are not checked here.
"""
import string

LEADING_CHARACTERS = frozenset(string.ascii_letters)
ALLOWED_CHARACTERS = frozenset(string.ascii_letters + string.digits + "_-: .")


def is_valid_pool_name(name: str) -> bool:
    """Check whether a string is a syntactically valid pool name."""
    if not name or name[0] not in LEADING_CHARACTERS:
        return False

    return all(c in ALLOWED_CHARACTERS for c in name[1:])
