"""Example applications built on the framework.

They double as executable documentation of the application contract
and are exposed as the ``slashapp-levels`` and ``slashapp-xcopy``
console scripts.
"""
