"""Shared constants for CodeSketch.

Response messages used by the HTTP layer and the command line.
"""

# =============================================================================
# Response Messages
# =============================================================================

MESSAGE_OK = "OK"

MESSAGE_NO_CODE = "No code provided."

MESSAGE_NOTHING_DETECTED = "No classes or functions detected for the selected/auto-detected language."

MESSAGE_TOO_LARGE = "Code exceeds the maximum accepted size of {limit} bytes."
