"""
CLI Subpackage.

Modules:
    - ``__main__``: The argparse definition and dispatcher.
    - ``handlers/*``: Implementation of the ``expand`` and ``check`` commands.
"""
