"""Push notification delivery over the binary gateway protocol.

The package is laid out in layers: ``domain`` holds the entities and errors,
``application`` the queueing and delivery use cases, ``infrastructure`` the
payload encoder, frame codec, gateway connection and persistence, and
``interfaces`` the HTTP API.
"""
