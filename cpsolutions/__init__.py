"""Solutions to classic competitive-programming problems, number-theory helpers and BigInt."""

__version__ = "0.1.0"

__all__ = ["bigint", "cli", "introductory", "numtheory", "problems"]