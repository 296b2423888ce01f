"""snake_case to camelCase / PascalCase conversion."""

import re

_UNDERSCORE_RE = re.compile(r"_+([a-zA-Z0-9])")


def to_camel_case(name: str) -> str:
    """user_name -> userName"""
    return _UNDERSCORE_RE.sub(lambda m: m.group(1).upper(), name.strip("_"))


def to_pascal_case(name: str) -> str:
    """user_info -> UserInfo; a schema prefix (db.user_info) is dropped."""
    camel = to_camel_case(name.rsplit(".", 1)[-1])
    return camel[:1].upper() + camel[1:]
