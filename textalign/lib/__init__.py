"""
Infrastructure shared by the `textalign` modules: environment settings, logging, exceptions, and
the command line argument parser.
"""
