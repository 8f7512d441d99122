"""
Constants and default values for model conversions and display.

This module centralizes the fallbacks used when converting API responses to
models and when rendering models as text.
"""

#
# Common defaults
#
EMPTY_STRING = ""
UNKNOWN = "Unknown"
UNASSIGNED = "Unassigned"
NO_TITLE = "No title"
NO_DESCRIPTION = "No description"

#
# Jira defaults
#
JIRA_DEFAULT_ID = "0"
JIRA_DEFAULT_KEY = UNKNOWN
