"""
Interfaces layer: CLI and HTTP API.

Interfaces call services (via Application) and format output; they hold no
discovery logic of their own.
"""
