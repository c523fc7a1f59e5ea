"""Core functionality for talking to a Hue hub.

This package contains:
- client: HueClient class for API interaction
- config: HubConfig and the user config file
- errors: Error types raised by the client
- response: Classification of hub responses as success or error
"""
