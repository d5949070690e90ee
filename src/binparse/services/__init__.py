"""Service layer — operations returning ServiceResult.

Services wrap the pure domain functions for the CLI and library callers.
They may import from domain and config, never from output or commands.
"""
