"""
API package containing versioned routes.

A version subpackage exposes a top‑level ``router`` built from its
route table.
"""
