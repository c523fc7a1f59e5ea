"""CLI command modules.

This package contains:
- setup: Registration and connection settings (register, config)
- inspection: Inspection commands (user-info, lights, light)
- control: Light control (set)
"""
