"""
Application package initializer.

This package contains the application factory and all of its
submodules.  The store lives in ``core``, request/response models in
``schemas``, business logic in ``services`` and the HTTP routes in
``api/v1/endpoints``.

No application instance is created at import time: the admin password
must be present before an app can be built, so importing the package
never fails on configuration.  Use ``create_app`` (or ``run.py``).
"""

from .main import create_app  # noqa: F401
