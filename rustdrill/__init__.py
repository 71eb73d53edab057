"""Exercise runner that compiles, tests and tracks progress through small exercises."""

__version__ = "5.0.0"