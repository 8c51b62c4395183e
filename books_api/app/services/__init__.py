"""
Service layer abstraction.

Services hold the SQL for a domain and hand typed records back to the
API handlers, which stay free of any database detail.
"""
