"""
Dictionary TUI - Terminal Dictionary Client

An interactive terminal interface and one-shot command-line tool for
looking up English word definitions from the Free Dictionary API.
"""

__version__ = "1.0.0"
__commit__ = "none"
__build_date__ = "unknown"
__author__ = "Dictionary TUI Contributors"
