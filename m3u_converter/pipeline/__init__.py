"""
This package contains the conversion pipeline of the M3U Converter.

The pipeline orchestrates a whole run: it filters the command-line arguments,
applies the output policy, drives the line transcoder for each playlist and
collects the per-file results.
"""
