# topmark:header:start
#
#   project      : JsonWriter
#   file         : __init__.py
#   file_relpath : src/jsonwriter/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line interface for JsonWriter.

The CLI is a thin Click layer over [`jsonwriter.core`][jsonwriter.core]: commands
translate arguments into writer calls and stream the result to stdout.
"""
