"""A runner that compiles, runs, tests and watches small Rust exercises."""

__version__ = "1.0.0"