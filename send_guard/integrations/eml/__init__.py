from .message import EmlMessageSource

__all__ = ['EmlMessageSource']
