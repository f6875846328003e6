"""Resolver functions backing the root Query and Mutation types.

Each resolver issues a single SQL statement through the request's Database.
"""
