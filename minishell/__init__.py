"""Shell execution engine: environment, expansion, builtins, redirections and pipelines."""

__version__ = "0.1.0"