"""
flexver CLI - Command-line interface for flexible version parsing.

Commands:
- parse: Parse version strings and report outcome and leftovers
- compare: Compare two loosely formatted version strings
- config: Show or change flexver configuration
"""
