"""
Core infrastructure shared by the routers and services:
settings, the database engine and sessions, password and token handling,
request dependencies (current user, services, integrations) and the
domain exception hierarchy.
"""
