"""Static attribution text for `rcp-palette author`."""

from rcp_palette import __version__

NAME = 'rcp-palette'
AUTHOR = 'rcp-palette contributors'
LICENSE = 'MIT'
DESCRIPTION = 'CSS colour parser: #RGB, #RRGGBB, #RRGGBBAA, rgb(r, g, b) and named colours.'

ABOUT_TEXT = '\n'.join(
    [
        f'--- {NAME} (CSS colour parser) ---',
        f'Author:      {AUTHOR}',
        f'Version:     {__version__}',
        f'License:     {LICENSE}',
        f'Description: {DESCRIPTION}',
    ]
)
