"""REST API boilerplate generator.

Emits an Express + Mongoose project skeleton (manifest, env file, entry point,
user model/controller/routes and optional JWT middleware) from a handful of
command-line flags.
"""

__version__ = "1.0.0"
