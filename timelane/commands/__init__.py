"""
Commands Package.

This package contains the command classes that apply user actions to the
item store. Commands validate their input and report the outcome as a
CommandResult instead of raising.
"""
