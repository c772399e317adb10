"""Command line client and server launcher for the W1 XML bridge.

Commands are registered on the Typer instance in :mod:`cli.app`.
"""
