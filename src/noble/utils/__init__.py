"""
Utility Package.

Console and logging helpers shared by the engine and the CLI.
"""
