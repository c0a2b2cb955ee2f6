"""
M3U Converter.

Converts `.m3u` playlists exported by desktop music libraries into the form
expected by portable players: bare filenames instead of full paths, and CRLF
line endings on every line.

Package layout:
    config/: Constants and the optional user YAML configuration.
    domain/: Conversion options, per-file results and the exception hierarchy.
    services/: The line transcoder, output policies, extension filtering and
               the YAML conversion report.
    pipeline/: The batch driver that ties the services together.
    cli.py: Command-line entry point.
"""

__version__ = "1.0.0"
