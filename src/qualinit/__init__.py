"""qualinit - interactive setup of JavaScript quality tooling."""

__version__ = "0.1.0"
