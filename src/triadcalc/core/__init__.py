"""
Core number model, tokenizer, solver, configuration, and errors.

Nothing in this package performs I/O; the CLI is a thin shell around it.
"""
