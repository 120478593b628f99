"""Route groups for the control-plane API.

This module collects logically-related endpoints:
- config: read and save the configuration file
- transformers: list transformers loaded by the host
- restart: acknowledge and schedule a process restart
"""
