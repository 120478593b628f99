"""Transport-independent operations behind the HTTP routes.

- control.py: read/save config and list transformers
- restart.py: two-phase deferred process restart
- transformers.py: registry interface consumed read-only
"""
