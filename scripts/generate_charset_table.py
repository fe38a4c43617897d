#!/usr/bin/env python
"""Generate docs/charsets.rst from the registry.

Usage: ``python scripts/generate_charset_table.py > docs/charsets.rst``
"""

from __future__ import annotations

from mimecharset.registry import REGISTRY


def main() -> None:
    """Print the registered charsets RST table to stdout."""
    total = len(REGISTRY)
    print("Registered Charsets")
    print("===================")
    print()
    print(f"mimecharset recognises **{total} charset names** by name.")
    print("Matching ignores ASCII case; any other name parses to")
    print(":class:`~mimecharset.Unregistered`.")
    print()
    print(".. list-table::")
    print("   :header-rows: 1")
    print("   :widths: 40 40")
    print()
    print("   * - Canonical name")
    print("     - Member")
    for member, name in REGISTRY:
        print(f"   * - ``{name}``")
        print(f"     - :attr:`~mimecharset.RegisteredCharset.{member.name}`")
    print()


if __name__ == "__main__":
    main()
