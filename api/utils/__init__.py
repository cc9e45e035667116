from api.utils.error_handlers import add_exception_handlers

__all__ = ["add_exception_handlers"]
