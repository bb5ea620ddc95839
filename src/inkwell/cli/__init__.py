"""
Command Line Interface for inkwell.
"""
