"""User-facing strings."""

MESSAGE_DEFAULT = "Record your voice to start."
MESSAGE_SELECT_PRESET = "Select a preset."
MESSAGE_NO_PRESET = "No preset available."
MESSAGE_NO_MATCHING_PRESET = "No such preset"
MESSAGE_PRESET_CHANGED = "Applied preset"
MESSAGE_PRESET_NOT_SET = "Preset not set"
MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_CANCEL = "Cancel"
MESSAGE_CANCELED = "Canceled."
MESSAGE_CONVERSION_FAILED = "Failed to synthesize voice"

HELP_TEXT = """
Following commands are supported:

/preset: change preset
/help : show this help message
"""
