"""Infrastructure Layer.

Adapters that perform I/O on behalf of the gridkit domain layer.
The domain never imports from here.
"""
