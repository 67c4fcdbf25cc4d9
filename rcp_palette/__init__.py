"""rcp-palette — parse CSS colour strings from the command line or from files."""

__version__ = '0.2.0'
