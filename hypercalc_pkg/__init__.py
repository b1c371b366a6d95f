"""HyperCalc package: tokenizer, shunting-yard converter, postfix evaluator and plot sampling."""

__all__ = [
    "config",
    "types",
    "tokenizer",
    "functions",
    "converter",
    "evaluator",
    "engine",
    "sampling",
    "formatting",
    "session",
    "plotting",
    "api",
    "cli",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "solve",
    "sample_function",
    "validate_expression",
    "plot",
]
