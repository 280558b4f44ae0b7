"""
holidaykit API

Read-only HTTP service over the country registry.

Run:
    uvicorn holidaykit.api.main:app
"""
