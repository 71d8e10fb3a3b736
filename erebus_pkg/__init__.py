"""Erebus package: tokenizer, shunting-yard converter, stack evaluator, API and CLI."""

__all__ = [
    "config",
    "tokenizer",
    "converter",
    "evaluator",
    "solver",
    "cli",
    "types",
    "api",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "evaluate",
    "validate_expression",
]
