"""
This package contains the core domain models of the M3U Converter.

The domain layer describes what a conversion is, independently of the command
line and of the filesystem code that performs it.

Modules:
    exceptions.py: Defines the exception hierarchy for the failures that can
                   occur while converting a single playlist.
    playlist.py: Contains `ConversionOptions`, the explicit configuration value
                 handed to the batch driver, and `ConversionResult`, the outcome
                 recorded for every command-line argument.
"""
