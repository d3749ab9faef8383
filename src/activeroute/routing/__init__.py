"""Routing — current-route view, glob patterns and action identifiers.

Only reads what the host router already matched. Nothing here
registers or dispatches routes.
"""
