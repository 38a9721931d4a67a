"""Small test-driven programming exercises: sums, greetings, dictionaries, wallets, shapes and more."""

__version__ = "0.1.0"