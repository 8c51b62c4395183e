"""
Pydantic schema definitions for API payloads.

``book`` defines the Book record and the response envelopes;
``validation`` checks untyped request bodies against the Book schema.
"""
