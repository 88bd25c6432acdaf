# topmark:header:start
#
#   project      : JsonWriter
#   file         : __init__.py
#   file_relpath : src/jsonwriter/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JsonWriter CLI subcommands."""
