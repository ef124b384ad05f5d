"""
Initialize the CLI package. Contains the dirzip command-line entry point.
"""
