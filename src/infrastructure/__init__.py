"""Infrastructure Layer.

Adapters implementing domain ports. All I/O lives here.
"""
