"""
Application Layer
=================

Use cases and services orchestrating the domain, plus request DTOs.
"""
