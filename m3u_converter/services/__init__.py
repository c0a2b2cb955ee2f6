"""
Services Package for the M3U Converter.

This package contains the "service layer" of the application: classes and
functions that each perform one part of a conversion, coordinated by the batch
pipeline.

- **Line Transcoder (`LineTranscoder`, `iter_lines`):**
  Splits a playlist into lines whatever its line endings, strips directory
  prefixes from path entries, keeps `#EXT` lines, and writes CRLF lines.

- **Output Targets (`SideDirectoryTarget`, `InPlaceTarget`):**
  Implement the two output policies: write into a separate directory, or
  replace the original file.

- **File Processing Service (`ProcessPlaylistFiles`):**
  Sorts command-line arguments into playlists and skipped files by extension.

- **Logging Service (`ConversionReport`):**
  Writes the optional YAML report of per-file results.
"""
