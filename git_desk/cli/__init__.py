"""Command-line interface for git-desk.

Entry points live in ``git_desk.cli.main``; argument parsing in
``git_desk.cli.args``.
"""
