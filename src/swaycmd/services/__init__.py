"""Service layer: operations consumed by the CLI.

Every public service method returns a
:class:`~swaycmd.services.result.ServiceResult`.
"""
