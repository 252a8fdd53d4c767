"""Routing — ordered route table with first-match dispatch.

Routes are registered during setup and read-only once the router
starts serving requests.
"""
