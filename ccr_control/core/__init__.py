"""Core configuration, errors and Pydantic models.

Contains:
- config.py: file locations, restart command and listen defaults
- errors.py: persistence error taxonomy
- log.py: logging setup
- models_io.py: response schemas used across routers
"""
