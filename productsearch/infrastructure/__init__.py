"""Infrastructure module.

Settings, database engine/session management and logging setup.
"""
