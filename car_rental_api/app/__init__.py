"""
Application package initializer.

Contains the FastAPI entrypoint (``main``) and its submodules: ``core``
for configuration, logging and database access, ``schemas`` for
request/response models, ``services`` for business logic and ``api``
for the HTTP routes.
"""
