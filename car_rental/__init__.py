"""
Car Rental Backend
==================

GraphQL API for renting cars: catalog, customers and the rental ledger.
"""
