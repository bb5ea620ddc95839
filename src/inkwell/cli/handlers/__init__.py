"""
Handlers for the inkwell subcommands.
"""
