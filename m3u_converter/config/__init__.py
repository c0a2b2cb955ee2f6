"""
Configuration Package for the M3U Converter.

This package centralizes the static configuration settings for the application.
Keeping configuration apart from the conversion logic makes it easy to adjust
parameters such as the output directory or the path separators without touching
the core code.

This package includes settings for:
- Playlist format constants (extension, metadata marker, line terminator).
- Output policy names, default output directory and its permissions.
- Common application settings like the logging format and result statuses.
- Loading of the optional user YAML configuration file.
"""
