"""Infrastructure layer: the sway IPC socket transport.

This layer depends on stdlib and third-party libs (pydantic).
It must never import from services, commands, or output.
The service layer bridges between domain builders and the transport.
"""
