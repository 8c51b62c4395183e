"""
Application package initializer.

The application is split into a few small layers: ``core`` holds
configuration, logging, errors and the database handle; ``schemas``
defines the Book shape and its validator; ``services`` talks to the
database; ``api`` binds HTTP routes to handlers.
"""
