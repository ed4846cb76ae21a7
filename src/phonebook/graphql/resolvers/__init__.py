"""Resolver package for the GraphQL schema.

Resolvers map schema fields onto contact store operations.
"""
