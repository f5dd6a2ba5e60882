"""Source names as target-language identifiers.

A source name that collides with a target keyword is emitted in raw form
(`r#match`). The path keywords `self`, `Self`, `super` and `crate` have no raw
form, so they get a trailing underscore instead.
"""

from __future__ import annotations

from typing import Final

STRICT_KEYWORDS: Final[frozenset[str]] = frozenset(
    {
        "as",
        "async",
        "await",
        "break",
        "const",
        "continue",
        "dyn",
        "else",
        "enum",
        "extern",
        "false",
        "fn",
        "for",
        "if",
        "impl",
        "in",
        "let",
        "loop",
        "match",
        "mod",
        "move",
        "mut",
        "pub",
        "ref",
        "return",
        "static",
        "struct",
        "trait",
        "true",
        "type",
        "unsafe",
        "use",
        "where",
        "while",
    }
)

RESERVED_KEYWORDS: Final[frozenset[str]] = frozenset(
    {
        "abstract",
        "become",
        "box",
        "do",
        "final",
        "gen",
        "macro",
        "override",
        "priv",
        "try",
        "typeof",
        "unsized",
        "virtual",
        "yield",
    }
)

PATH_KEYWORDS: Final[frozenset[str]] = frozenset({"self", "Self", "super", "crate"})


def rust_identifier(name: str) -> str:
    if name in PATH_KEYWORDS:
        return f"{name}_"
    if name in STRICT_KEYWORDS or name in RESERVED_KEYWORDS:
        return f"r#{name}"
    return name
