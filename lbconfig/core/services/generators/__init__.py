"""
Generators — produce load-balancer config from a team list.

Each generator module exposes a ``generate()`` function that returns
the rendered text, plus a helper that wraps it in a ``GeneratedFile``.
"""
