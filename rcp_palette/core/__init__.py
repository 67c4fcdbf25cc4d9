"""rcp_palette.core — Foundation layer.

Contains the colour types, the colour parser, the file scanner, the named
colour palette, configuration and the report builder.
This module has NO dependencies on rcp_palette.__main__.
Only stdlib, numpy, and PIL are allowed here.
"""
