"""
Infrastructure Layer
====================

Adapters for the relational store and credential hashing.
"""
