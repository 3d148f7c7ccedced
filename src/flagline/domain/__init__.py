"""Domain layer - argument specs, schemas, results and errors.

This layer contains:
- types: ArgumentSpec, ArgumentSchema, ParsedArguments, ParseResult
- protocols: Interfaces the parsing stages satisfy
- exceptions: Domain-specific exceptions

The domain layer has no dependencies on the core, application, or presentation layers.
"""
