from .surface import ConsoleConfirmationSurface, ScriptedConfirmationSurface

__all__ = ['ConsoleConfirmationSurface', 'ScriptedConfirmationSurface']
